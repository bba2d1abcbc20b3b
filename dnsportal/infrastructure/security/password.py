"""Password hashing (bcrypt with SHA-256 pre-hash).

Bcrypt truncates inputs at 72 bytes; pre-hashing with SHA-256 yields a fixed-length
input so long passwords are not silently truncated. The cost factor comes from
settings.bcrypt_rounds (12 by default).

Both functions are CPU-bound; async callers run them via asyncio.to_thread.
"""

import base64
import hashlib

import bcrypt

from dnsportal.core.config import get_settings

_dummy_hash_cache: str | None = None


def _prehash(password: str) -> bytes:
    """SHA-256 pre-hash to avoid bcrypt's 72-byte truncation."""
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if plain_password matches hashed_password."""
    try:
        result = bcrypt.checkpw(
            _prehash(plain_password),
            hashed_password.encode("utf-8"),
        )
        return bool(result)
    except (ValueError, TypeError):
        return False


def get_password_hash(password: str) -> str:
    """Return bcrypt hash of password (SHA-256 pre-hashed before bcrypt)."""
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    hashed = bcrypt.hashpw(_prehash(password), salt)
    return hashed.decode("utf-8")


def verify_dummy_password(plain_password: str) -> bool:
    """Run a full bcrypt comparison against a throwaway hash; always False.

    Used when the account does not exist so the response takes as long as a
    real password check (account enumeration by timing).
    """
    global _dummy_hash_cache
    if _dummy_hash_cache is None:
        _dummy_hash_cache = get_password_hash("not-a-real-password")
    verify_password(plain_password, _dummy_hash_cache)
    return False
