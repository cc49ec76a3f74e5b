"""Token digest helpers."""

import hashlib
import hmac


def hash_token(secret: str) -> str:
    """SHA-256 of the UTF-8 encoded secret, lowercase hex."""
    return hashlib.sha256(secret.encode("utf-8")).hexdigest()


def token_matches(secret: str, token_hash: str) -> bool:
    """Compare a secret against a stored hash in constant time."""
    return hmac.compare_digest(hash_token(secret), token_hash)
