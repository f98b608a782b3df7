"""Defines the token and user concepts shared by the auth components."""

from typing import Any, Dict, NamedTuple

Claims = Dict[str, Any]

HEADER: Dict[str, str] = {'typ': 'JWT', 'alg': 'HS256'}
"""The only header this system issues. It never varies between tokens."""


class Token(NamedTuple):
    """A decoded token. Obtained via :func:`.auth.tokens.unpack`."""

    header: Dict[str, Any]
    """Decoded JOSE header."""

    claims: Claims
    """
    Decoded payload.

    ``username``, ``display_name``, ``iat`` and ``exp`` are interpreted by
    this package; any other key is carried along without inspection.
    """

    signature: bytes
    """Raw HMAC-SHA256 digest (not base64)."""


class Credential(NamedTuple):
    """A stored user record, as returned by a credential store."""

    username: str
    password_hash: str
    display_name: str


class AuthenticatedUser(NamedTuple):
    """The identity yielded by a successful token check."""

    username: str
    display_name: str
    claims: Claims
    """The full claims set of the token, including ``iat`` and ``exp``."""


def to_dict(user: AuthenticatedUser) -> Dict[str, str]:
    """Generate the public representation of an authenticated user."""
    return {'username': user.username, 'display_name': user.display_name}
