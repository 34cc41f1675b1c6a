"""
security/passwords.py
---------------------
One-way password hashing with bcrypt.
Plaintext passwords never leave this module in stored form.
"""

from typing import Optional

import bcrypt

from config import BCRYPT_ROUNDS
from utils.logger import get_logger

logger = get_logger(__name__)

# bcrypt only reads the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


def _password_bytes(password: str) -> bytes:
    """UTF-8 encode a password, truncated to what bcrypt actually hashes."""
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """
    Hash a plaintext password with a fresh salt.

    Passwords longer than 72 bytes are truncated, so a long passphrase
    is accepted and matches on its first 72 bytes.

    Args:
        password: The plaintext password.
        rounds: bcrypt cost factor (defaults to BCRYPT_ROUNDS, normally 10).

    Returns:
        The salted hash as text, suitable for the users.password column.
    """
    salt = bcrypt.gensalt(rounds=rounds or BCRYPT_ROUNDS)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """
    Compare a plaintext password against a stored bcrypt hash.

    A malformed hash counts as a mismatch.
    """
    try:
        return bcrypt.checkpw(_password_bytes(password), hashed.encode("utf-8"))
    except ValueError as e:
        logger.warning(f"Password check rejected: {e}")
        return False
