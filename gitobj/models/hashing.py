import hashlib

__all__ = ["HASH_SIZE", "create_hash", "serialize_object", "hash_object_content"]

NULL_BYTE = b"\x00"
HASH_SIZE = 20


def create_hash(data: str | bytes, *, hasher=hashlib.sha1) -> str:
    if isinstance(data, str):
        data = data.encode()
    hash_object = hasher(data)
    return hash_object.hexdigest()


def serialize_object(content: bytes, object_type: str) -> bytes:
    """Return the canonical ``<type> <size>\\0<content>`` form of an object."""
    header = f"{object_type} {len(content)}".encode()
    return header + NULL_BYTE + content


def hash_object_content(content: bytes, object_type: str, *, hasher=hashlib.sha1) -> str:
    return create_hash(serialize_object(content, object_type), hasher=hasher)
