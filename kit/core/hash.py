"""Hash utilities for Kit."""

import hashlib


def hash_bytes(data: bytes) -> str:
    """
    Compute SHA-1 hash of data.

    Args:
        data: Bytes to hash

    Returns:
        40-character lowercase hex string
    """
    return hashlib.sha1(data).hexdigest()


def is_object_id(value: str) -> bool:
    """Check that a string is a full 40-character lowercase hex id."""
    return len(value) == 40 and all(c in '0123456789abcdef' for c in value)
