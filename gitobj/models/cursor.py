from gitobj.errors import TruncatedEntryError, TruncatedHashError

__all__ = ["ByteCursor"]


class ByteCursor:
    """Forward-only reader over an immutable byte buffer."""

    def __init__(self, data: bytes, offset: int = 0):
        self.data = bytes(data)
        self.offset = offset

    def __len__(self):
        return len(self.data) - self.offset

    @property
    def exhausted(self) -> bool:
        return self.offset >= len(self.data)

    def read_until(self, delimiter: bytes, *, field: str = "field") -> bytes:
        """Return the bytes before ``delimiter`` and move past the delimiter."""
        index = self.data.find(delimiter, self.offset)
        if index == -1:
            raise TruncatedEntryError(
                f"missing {delimiter!r} terminator",
                context=f"reading {field} at offset {self.offset}",
            )
        value = self.data[self.offset : index]
        self.offset = index + len(delimiter)
        return value

    def read_exact(self, size: int, *, field: str = "hash") -> bytes:
        if len(self) < size:
            raise TruncatedHashError(
                f"expected {size} bytes, got {len(self)}",
                context=f"reading {field} at offset {self.offset}",
            )
        value = self.data[self.offset : self.offset + size]
        self.offset += size
        return value
