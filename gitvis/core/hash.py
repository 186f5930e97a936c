"""Hash utilities for gitvis."""

import hashlib


def hash_object(data: bytes) -> str:
    """
    Compute SHA-1 hash of data.
    
    Args:
        data: Bytes to hash
        
    Returns:
        40-character hex string
    """
    return hashlib.sha1(data).hexdigest()


def short_hash(checksum: str, length: int = 7) -> str:
    """
    Abbreviate a checksum for display.
    
    Args:
        checksum: Full hex checksum
        length: Number of characters to keep
        
    Returns:
        Abbreviated checksum
    """
    return checksum[:length]
