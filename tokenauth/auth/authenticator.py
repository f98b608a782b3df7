"""
Verification of bearer tokens presented on requests.

:func:`authenticate` runs a single pass over the token, in this order:

1. extract the token from a ``Bearer <token>`` header value,
2. check that it has the three-segment shape,
3. check its signature,
4. decode its claims,
5. check its ``exp`` claim.

The first check to fail ends the pass with the corresponding
:class:`.TokenError`; later checks are never attempted. A token without an
``exp`` claim does not expire.
"""

import logging
import math
import re
from typing import Any, Optional

from . import signing, tokens
from .exceptions import ConfigurationError, ExpiredToken, InvalidPayload, \
    InvalidToken, MissingToken, TokenError
from .. import domain

logger = logging.getLogger(__name__)

BEARER_PATTERN = re.compile(r'Bearer (\S+)')


def extract(header: Optional[str]) -> str:
    """
    Get the token from an ``Authorization`` header value.

    Raises
    ------
    :class:`.MissingToken`
        Raised if the header is absent or is not exactly ``Bearer <token>``.

    """
    match = BEARER_PATTERN.fullmatch(header) if header else None
    if match is None:
        raise MissingToken('No bearer token in Authorization header')
    return match.group(1)


def _is_timestamp(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return math.isfinite(value)
    return isinstance(value, int)


def _identity(claims: domain.Claims, key: str) -> str:
    value = claims.get(key, '')
    if value is None:
        return ''
    if not isinstance(value, str):
        raise InvalidPayload(f'Claim {key} is not a string')
    return value


def authenticate(header: Optional[str], secret: signing.Secret,
                 now: Optional[int] = None) -> domain.AuthenticatedUser:
    """
    Authenticate a request from its ``Authorization`` header value.

    Parameters
    ----------
    header : str or None
    secret : str or bytes
    now : int
        UNIX time to check expiry against. Defaults to the current time.

    Returns
    -------
    :class:`.domain.AuthenticatedUser`

    Raises
    ------
    :class:`.MissingToken`
    :class:`.InvalidToken`
        Also raised as its subclass :class:`.MalformedToken`.
    :class:`.InvalidPayload`
    :class:`.ExpiredToken`

    """
    token = extract(header)
    _, encoded_claims, _ = tokens.parse(token)
    if not signing.verify(token, secret):
        raise InvalidToken('Signature does not match')
    claims = tokens.decode_claims(encoded_claims)

    expires = claims.get('exp')
    if expires is not None:
        if not _is_timestamp(expires):
            raise InvalidPayload('Claim exp is not a timestamp')
        if now is None:
            now = tokens.now()
        if expires < now:
            raise ExpiredToken(f'Token expired at {expires}')

    return domain.AuthenticatedUser(
        username=_identity(claims, 'username'),
        display_name=_identity(claims, 'display_name'),
        claims=claims
    )


class Authenticator(object):
    """Authenticates requests against a fixed secret."""

    def __init__(self, secret: signing.Secret) -> None:
        if not secret:
            raise ConfigurationError('A signing secret is required')
        self._secret = secret

    def __repr__(self) -> str:
        return f'{type(self).__name__}()'

    def authenticate(self, header: Optional[str],
                     now: Optional[int] = None) -> domain.AuthenticatedUser:
        """Authenticate a header value. See :func:`.authenticate`."""
        try:
            user = authenticate(header, self._secret, now=now)
        except TokenError as e:
            logger.debug('Token rejected (%s): %s', type(e).__name__, e)
            raise
        logger.debug('Authenticated %s', user.username)
        return user
