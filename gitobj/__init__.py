from gitobj.errors import ErrorKind, GitObjectError
from gitobj.models import Blob, EntryKind, Git, Tree, TreeEntry, decode_object
from gitobj.models.hashing import create_hash, hash_object_content

__all__ = [
    "Blob",
    "EntryKind",
    "ErrorKind",
    "Git",
    "GitObjectError",
    "Tree",
    "TreeEntry",
    "create_hash",
    "decode_object",
    "hash_object_content",
]
