"""
Password hashing helpers.

Passwords are hashed with PBKDF2-HMAC using SHA-256 and a random
16-byte salt.  The stored digest embeds everything needed to verify
it later, in the form::

    pbkdf2_sha256$<iterations>$<salt hex>$<hash hex>

so the work factor can be raised without invalidating existing
users.  Digests are one-way; there is no function to recover the
plaintext.
"""

import hashlib
import hmac
import os
from typing import Optional

from .config import settings

ALGORITHM = "pbkdf2_sha256"
SALT_BYTES = 16
MIN_PASSWORD_LENGTH = 6


def hash_password(password: str, iterations: Optional[int] = None) -> str:
    """Hash a password using PBKDF2-HMAC with SHA-256.

    Parameters
    ----------
    password : str
        The plain text password to hash.  Must be at least
        ``MIN_PASSWORD_LENGTH`` characters long.
    iterations : Optional[int]
        PBKDF2 iteration count.  Defaults to
        ``settings.password_hash_iterations``.

    Returns
    -------
    str
        The digest with its algorithm, iteration count and salt
        embedded, separated by ``$``.

    Raises
    ------
    ValueError
        If the password is shorter than ``MIN_PASSWORD_LENGTH``.
    """
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    rounds = iterations or settings.password_hash_iterations
    salt = os.urandom(SALT_BYTES)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, rounds)
    return f"{ALGORITHM}${rounds}${salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored digest.

    Re-derives the key with the iteration count and salt embedded in
    ``hashed_password`` and compares it using a constant-time
    comparison.  Malformed digests never verify.
    """
    try:
        algorithm, rounds, salt_hex, hash_hex = hashed_password.split("$")
        if algorithm != ALGORITHM:
            return False
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
        dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, int(rounds))
    except (AttributeError, ValueError):
        return False
    return hmac.compare_digest(dk, stored_hash)
