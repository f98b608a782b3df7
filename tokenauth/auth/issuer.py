"""Builds claims sets and produces signed tokens."""

import logging
from typing import Any, Mapping, Optional

from . import codec, signing, tokens
from .exceptions import ConfigurationError
from .. import domain

logger = logging.getLogger(__name__)

DEFAULT_TTL = 1_209_600
"""Fourteen days, in seconds."""


def issue(identity: Mapping[str, Any], secret: signing.Secret,
          now: Optional[int] = None, ttl: int = DEFAULT_TTL) -> str:
    """
    Produce a signed token carrying ``identity`` plus ``iat`` and ``exp``.

    Parameters
    ----------
    identity : mapping
        Claims to embed, typically ``username`` and ``display_name``. Any
        ``iat`` or ``exp`` given here is replaced.
    secret : str or bytes
    now : int
        Issuance time as a UNIX timestamp. Defaults to the current time.
    ttl : int
        Seconds until the token expires.

    Returns
    -------
    str
        ``header.claims.signature``, each segment base64url without padding.

    """
    if now is None:
        now = tokens.now()
    claims = dict(identity)
    claims['iat'] = now
    claims['exp'] = now + ttl
    encoded_header, encoded_claims = tokens.serialize(domain.HEADER, claims)
    signature = signing.sign(encoded_header, encoded_claims, secret)
    return f'{encoded_header}.{encoded_claims}.{codec.encode(signature)}'


class TokenIssuer(object):
    """Issues tokens with a fixed secret and lifetime."""

    def __init__(self, secret: signing.Secret, ttl: int = DEFAULT_TTL) -> None:
        if not secret:
            raise ConfigurationError('A signing secret is required')
        self._secret = secret
        self.ttl = ttl

    def __repr__(self) -> str:
        return f'{type(self).__name__}(ttl={self.ttl})'

    def issue(self, identity: Mapping[str, Any],
              now: Optional[int] = None) -> str:
        """Produce a signed token for ``identity``. See :func:`.issue`."""
        token = issue(identity, self._secret, now=now, ttl=self.ttl)
        logger.debug('Issued token for %s', identity.get('username'))
        return token
