BLOB_CONTENT = b"what is up, doc?"
BLOB_HASH = "bd9dbf5aae1a3862dd1526723246b20206e5fc37"

TREE_CONTENT = (
    b"100644 file1.txt\x00" + bytes(range(0x01, 0x15))
    + b"100644 file2.txt\x00" + bytes(range(0x51, 0x65))
    + b"40000 folder\x00" + bytes(range(0x81, 0x95))
)


def envelope(object_type: str, content: bytes) -> bytes:
    return f"{object_type} {len(content)}".encode() + b"\x00" + content
