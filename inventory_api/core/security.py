# File: inventory_api/core/security.py

"""
Password hashing helpers.

Hashes are bcrypt strings; the work factor comes from ``Settings.bcrypt_rounds``.
"""

from functools import lru_cache

import bcrypt

DEFAULT_ROUNDS = 10

# bcrypt ignores (newer releases reject) anything past 72 bytes
_MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_MAX_PASSWORD_BYTES]


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(_encode(password), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """
    Constant-time comparison of a plaintext password against a stored hash.

    A malformed stored hash counts as a mismatch.
    """
    try:
        return bcrypt.checkpw(_encode(password), hashed.encode("utf-8"))
    except ValueError:
        return False


@lru_cache
def dummy_hash(rounds: int = DEFAULT_ROUNDS) -> str:
    """
    Throwaway hash checked when no user matches the email. Unknown emails
    and wrong passwords cost the same bcrypt work.
    """
    return hash_password("not-a-real-password", rounds)
