"""SHA-256 content hashing for render cache keys"""

import hashlib


def sha256(content: str) -> str:
    """Return hex-encoded SHA-256 hash of content (64 chars)."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()
