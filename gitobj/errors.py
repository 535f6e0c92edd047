from enum import StrEnum, auto

__all__ = [
    "ErrorKind",
    "GitObjectError",
    "HeaderFormatError",
    "SizeFormatError",
    "SizeMismatchError",
    "EncodingError",
    "TruncatedEntryError",
    "TruncatedHashError",
    "UnknownObjectTypeError",
    "StorageReadError",
    "DecompressionError",
]


class ErrorKind(StrEnum):
    HEADER_FORMAT = auto()
    SIZE_FORMAT = auto()
    SIZE_MISMATCH = auto()
    ENCODING = auto()
    TRUNCATED_ENTRY = auto()
    TRUNCATED_HASH = auto()
    UNKNOWN_OBJECT_TYPE = auto()
    STORAGE_READ = auto()
    DECOMPRESSION = auto()


class GitObjectError(Exception):
    """Base error for everything that can go wrong while loading an object.

    ``kind`` is one of :class:`ErrorKind` so callers can branch on it,
    ``context`` names what was being read when the failure happened.
    """

    kind: ErrorKind

    def __init__(self, message: str, *, context: str | None = None):
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self):
        if self.context:
            return f"{self.message} ({self.context})"
        return self.message


class HeaderFormatError(GitObjectError):
    kind = ErrorKind.HEADER_FORMAT


class SizeFormatError(GitObjectError):
    kind = ErrorKind.SIZE_FORMAT


class SizeMismatchError(GitObjectError):
    kind = ErrorKind.SIZE_MISMATCH


class EncodingError(GitObjectError):
    kind = ErrorKind.ENCODING


class TruncatedEntryError(GitObjectError):
    kind = ErrorKind.TRUNCATED_ENTRY


class TruncatedHashError(GitObjectError):
    kind = ErrorKind.TRUNCATED_HASH


class UnknownObjectTypeError(GitObjectError):
    kind = ErrorKind.UNKNOWN_OBJECT_TYPE


class StorageReadError(GitObjectError):
    kind = ErrorKind.STORAGE_READ


class DecompressionError(GitObjectError):
    kind = ErrorKind.DECOMPRESSION
