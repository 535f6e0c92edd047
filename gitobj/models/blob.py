from dataclasses import dataclass
from enum import StrEnum, auto

from gitobj.models.hashing import hash_object_content

__all__ = ["ObjectType", "EntryKind", "Blob", "TreeEntry", "Tree", "GitObject"]


class ObjectType(StrEnum):
    BLOB = auto()
    TREE = auto()


class EntryKind(StrEnum):
    REGULAR_FILE = auto()
    EXECUTABLE_FILE = auto()
    SYMLINK = auto()
    SUBTREE = auto()
    SUBMODULE = auto()
    UNKNOWN = auto()

    @classmethod
    def from_mode(cls, mode: str) -> "EntryKind":
        match mode:
            case "100644":
                return cls.REGULAR_FILE
            case "100755":
                return cls.EXECUTABLE_FILE
            case "120000":
                return cls.SYMLINK
            case "40000":
                return cls.SUBTREE
            case "160000":
                return cls.SUBMODULE
            case _:
                return cls.UNKNOWN

    @property
    def object_type(self) -> str:
        """Type of the object an entry of this kind points at."""
        match self:
            case EntryKind.REGULAR_FILE | EntryKind.EXECUTABLE_FILE | EntryKind.SYMLINK:
                return "blob"
            case EntryKind.SUBTREE:
                return "tree"
            case EntryKind.SUBMODULE:
                return "commit"
            case _:
                return "unknown"


@dataclass(frozen=True, kw_only=True)
class Blob:
    content: bytes

    type = ObjectType.BLOB

    def hash(self) -> str:
        return hash_object_content(self.content, self.type)


@dataclass(frozen=True, kw_only=True)
class TreeEntry:
    mode: str
    name: str
    hash: str

    @property
    def kind(self) -> EntryKind:
        return EntryKind.from_mode(self.mode)

    @property
    def raw_hash(self) -> bytes:
        return bytes.fromhex(self.hash)

    def serialize(self) -> bytes:
        return f"{self.mode} {self.name}".encode() + b"\0" + self.raw_hash


@dataclass(frozen=True, kw_only=True)
class Tree:
    entries: tuple[TreeEntry, ...] = ()

    type = ObjectType.TREE

    def serialize(self) -> bytes:
        return b"".join(entry.serialize() for entry in self.entries)

    def hash(self) -> str:
        return hash_object_content(self.serialize(), self.type)


GitObject = Blob | Tree
