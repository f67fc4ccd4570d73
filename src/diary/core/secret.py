"""Secret phrase hashing and verification - no I/O."""

import hashlib
import hmac

DIGEST_LENGTH = 64


def hash_secret(secret: str) -> str:
    """SHA-256 of the phrase as 64 lowercase hex characters."""
    return hashlib.sha256(secret.encode("utf-8")).hexdigest()


def verify_secret(secret: str, stored_digest: str) -> bool:
    """Check a phrase against a stored digest in constant time."""
    if not stored_digest:
        return False
    return hmac.compare_digest(hash_secret(secret), stored_digest)
