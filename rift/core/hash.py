"""Hash utilities for Rift."""

import hashlib
import re

DIGEST_LENGTH = 64

_DIGEST_RE = re.compile(r'^[0-9a-f]{64}$')


def hash_object(data: bytes) -> str:
    """
    Compute SHA-256 hash of data.
    
    Args:
        data: Bytes to hash
        
    Returns:
        64-character lowercase hex string
    """
    return hashlib.sha256(data).hexdigest()


def is_digest(value: str) -> bool:
    """Check whether value looks like a Rift object digest."""
    return bool(_DIGEST_RE.match(value))
