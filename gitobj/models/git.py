import binascii
import logging
import pathlib
import re
import sys
import zlib
from dataclasses import dataclass
from os import PathLike

from gitobj.errors import (
    DecompressionError,
    EncodingError,
    HeaderFormatError,
    SizeFormatError,
    SizeMismatchError,
    StorageReadError,
    UnknownObjectTypeError,
)
from gitobj.models.blob import Blob, GitObject, ObjectType, Tree, TreeEntry
from gitobj.models.cursor import ByteCursor
from gitobj.models.hashing import HASH_SIZE, NULL_BYTE, hash_object_content
from gitobj.models.storage import FileStorage

__all__ = ["Git", "ObjectHeader", "parse_header", "parse_tree_content", "decode_object"]

logger = logging.getLogger(__name__)

DEFAULT_GIT_FOLDER = ".git"
DEFAULT_MAX_OBJECT_SIZE = 100 * 1024 * 1024
SPACE = b" "
HASH_PATTERN = re.compile(r"[0-9a-f]{40}")


@dataclass(frozen=True, kw_only=True)
class ObjectHeader:
    type_tag: str
    declared_size: int
    header_end_offset: int


def _decode_text(raw: bytes, field: str) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise EncodingError(f"{field} is not valid UTF-8", context=repr(raw)) from exc


def parse_header(data: bytes) -> ObjectHeader:
    """Parse the ``<type> <size>\\0`` prefix of a decompressed object.

    ``header_end_offset`` is the offset of the NUL byte closing the header.
    """
    space_index = data.find(SPACE)
    null_index = data.find(NULL_BYTE)
    if space_index == -1 or null_index == -1:
        raise HeaderFormatError("incorrect header format", context=repr(data[:32]))
    if null_index < space_index:
        raise HeaderFormatError(
            "header terminator before type separator", context=repr(data[:null_index])
        )

    type_tag = _decode_text(data[:space_index], "object type")
    size_field = data[space_index + 1 : null_index]
    if not size_field.isdigit():
        raise SizeFormatError("invalid object size", context=repr(size_field))
    return ObjectHeader(
        type_tag=type_tag, declared_size=int(size_field), header_end_offset=null_index
    )


def parse_tree_content(content: bytes) -> tuple[TreeEntry, ...]:
    # Format (one per file/folder/submodule):
    # <mode> <name>\0<SHA-1 in binary format (20 bytes)>
    cursor = ByteCursor(content)
    entries = []
    while not cursor.exhausted:
        mode = _decode_text(cursor.read_until(SPACE, field="mode"), "mode")
        name = _decode_text(cursor.read_until(NULL_BYTE, field="name"), "name")
        raw_hash = cursor.read_exact(HASH_SIZE, field=f"hash of {name!r}")
        entries.append(
            TreeEntry(mode=mode, name=name, hash=binascii.hexlify(raw_hash).decode())
        )
    return tuple(entries)


def decode_object(data: bytes) -> GitObject:
    header = parse_header(data)
    content = bytes(data[header.header_end_offset + 1 :])
    if len(content) != header.declared_size:
        raise SizeMismatchError(
            "incorrect header length",
            context=f"declared {header.declared_size}, got {len(content)}",
        )

    match header.type_tag:
        case ObjectType.BLOB:
            return Blob(content=content)
        case ObjectType.TREE:
            return Tree(entries=parse_tree_content(content))
        case _:
            raise UnknownObjectTypeError(
                "unknown object type", context=repr(header.type_tag)
            )


class Git:
    def __init__(
        self,
        git_folder: PathLike | str = DEFAULT_GIT_FOLDER,
        *,
        storage=None,
        decompressor=None,
        max_object_size: int = DEFAULT_MAX_OBJECT_SIZE,
    ):
        self.git_folder = pathlib.Path(git_folder)
        self.objects_folder = self.git_folder / "objects"
        self.storage = storage or FileStorage(self.objects_folder)
        self.decompressor = decompressor or self.decompress
        self.max_object_size = max_object_size

    def __enter__(self):
        self.storage.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.storage.__exit__(exc_type, exc_val, exc_tb)

    @staticmethod
    def object_path(hash_: str) -> str:
        if not HASH_PATTERN.fullmatch(hash_):
            raise StorageReadError("not a valid object name", context=repr(hash_))
        return f"{hash_[:2]}/{hash_[2:]}"

    @staticmethod
    def decompress(data: bytes, *, max_size: int = DEFAULT_MAX_OBJECT_SIZE) -> bytes:
        decompressor = zlib.decompressobj()
        try:
            result = decompressor.decompress(data, max_size + 1)
        except zlib.error as exc:
            raise DecompressionError("corrupt zlib stream", context=str(exc)) from exc
        if len(result) > max_size:
            raise DecompressionError(
                "object too large", context=f"more than {max_size} bytes"
            )
        if not decompressor.eof:
            raise DecompressionError("truncated zlib stream")
        return result

    def load(self, hash_: str) -> GitObject:
        return self._load_location(self.object_path(hash_))

    def load_path(self, path: PathLike | str) -> GitObject:
        """Load an object file directly, bypassing the configured storage."""
        path = pathlib.Path(path)
        return self._load_location(path.name, storage=FileStorage(path.parent))

    def _load_location(self, location, *, storage=None) -> GitObject:
        compressed = (storage or self.storage).read(location)
        data = self.decompressor(compressed, max_size=self.max_object_size)
        logger.debug(
            "decompressed %s: %d -> %d bytes", location, len(compressed), len(data)
        )
        return decode_object(data)

    def cat_file(self, hash_: str, *, pretty_print: bool = False) -> GitObject:
        git_object = self.load(hash_)
        if pretty_print:
            match git_object:
                case Blob(content=content):
                    sys.stdout.flush()
                    sys.stdout.buffer.write(content)
                    sys.stdout.buffer.flush()
                case Tree(entries=entries):
                    self._print_entries(entries)
        return git_object

    def ls_tree(self, hash_value: str, *, name_only: bool = False) -> tuple[TreeEntry, ...]:
        match self.load(hash_value):
            case Tree(entries=entries):
                pass
            case Blob():
                raise UnknownObjectTypeError(
                    "not a tree object", context=f"{hash_value} is a blob"
                )
        self._print_entries(entries, name_only=name_only)
        return entries

    @staticmethod
    def _print_entries(entries, *, name_only: bool = False):
        for entry in entries:
            if name_only:
                print(entry.name)
            else:
                print(f"{entry.mode:0>6} {entry.kind.object_type} {entry.hash}\t{entry.name}")

    @staticmethod
    def hash_object(path: pathlib.Path, *, pretty_print: bool = True) -> str:
        try:
            with pathlib.Path(path).open("rb") as f:
                content = f.read()
        except OSError as exc:
            raise StorageReadError(
                f"could not read {path}", context=exc.strerror
            ) from exc
        hash_value = hash_object_content(content, ObjectType.BLOB)
        if pretty_print:
            sys.stdout.write(hash_value)
        return hash_value
