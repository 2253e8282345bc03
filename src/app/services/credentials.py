"""
Password Credentials

Salted password hashing for employee accounts.
"""

import hmac
from typing import Tuple

import bcrypt

BCRYPT_ROUNDS = 12


class PasswordHashError(ValueError):
    """Raised when a password cannot be turned into a credential"""


def create_password_hash(password: str) -> Tuple[bytes, bytes]:
    """
    Hash a password with a freshly generated salt.

    Args:
        password: Plain text password

    Returns:
        Tuple of (hash, salt) as bytes

    Raises:
        PasswordHashError: If the password is empty or too long for bcrypt
    """
    if not password:
        raise PasswordHashError("Password must not be empty")

    encoded = password.encode("utf-8")
    # bcrypt only looks at the first 72 bytes
    if len(encoded) > 72:
        raise PasswordHashError("Password must be at most 72 bytes long")

    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(encoded, salt), salt


def verify_password_hash(password: str, password_hash: bytes, salt: bytes) -> bool:
    """Recompute the hash with the stored salt and compare in constant time"""
    encoded = password.encode("utf-8")
    if not encoded or len(encoded) > 72:
        return False

    try:
        candidate = bcrypt.hashpw(encoded, bytes(salt))
    except ValueError:
        # Stored salt is not a bcrypt salt
        return False

    return hmac.compare_digest(candidate, bytes(password_hash))
