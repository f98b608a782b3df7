"""Password hashing with bcrypt."""

import logging
import secrets
from functools import lru_cache

import bcrypt

from .exceptions import PasswordAuthenticationFailed, ValidationFailed

logger = logging.getLogger(__name__)

MAX_PASSWORD_BYTES = 72
"""bcrypt only looks at this many bytes of input."""


def hash_password(password: str, rounds: int = 12) -> str:
    """
    Generate a salted bcrypt hash of a password.

    Raises
    ------
    :class:`.ValidationFailed`
        Raised if the password is longer than bcrypt can hash.

    """
    encoded = password.encode('utf-8')
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise ValidationFailed(
            f'Password must be at most {MAX_PASSWORD_BYTES} bytes.'
        )
    return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds)).decode('ascii')


def check_password(password: str, encrypted: str) -> None:
    """
    Check a password against a bcrypt hash.

    Raises
    ------
    :class:`.PasswordAuthenticationFailed`
        Raised if the password does not match, or the hash is unusable.

    """
    encoded = password.encode('utf-8')
    if len(encoded) > MAX_PASSWORD_BYTES:
        raise PasswordAuthenticationFailed('Incorrect password')
    try:
        matches = bcrypt.checkpw(encoded, encrypted.encode('ascii'))
    except (ValueError, UnicodeEncodeError) as e:
        logger.error('Stored password hash is not a bcrypt hash')
        raise PasswordAuthenticationFailed('Unusable password hash') from e
    if not matches:
        raise PasswordAuthenticationFailed('Incorrect password')


@lru_cache(maxsize=None)
def placeholder_hash(rounds: int = 12) -> str:
    """
    Get a hash of an unknown random password, at the given cost.

    Checking a password against it costs the same as checking against a
    stored hash, and never succeeds.
    """
    return hash_password(secrets.token_urlsafe(32), rounds=rounds)
