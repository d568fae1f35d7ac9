# minidrive/core/security.py
import hashlib
import hmac


def hash_password(password: str) -> str:
    # Unsalted single-pass SHA-256; existing users.json digests depend on it.
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def verify_password(password: str, digest: str) -> bool:
    return hmac.compare_digest(hash_password(password), digest)
