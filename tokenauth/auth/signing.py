"""HMAC-SHA256 signing and verification of token segments."""

import hashlib
import hmac
import logging
from typing import Union

from . import codec, tokens
from .exceptions import DecodeError, MalformedToken

logger = logging.getLogger(__name__)

Secret = Union[str, bytes]


def _key(secret: Secret) -> bytes:
    if isinstance(secret, str):
        return secret.encode('utf-8')
    return secret


def sign(encoded_header: str, encoded_claims: str, secret: Secret) -> bytes:
    """
    Compute the raw signature over the header and claims segments.

    Parameters
    ----------
    encoded_header : str
    encoded_claims : str
        The base64url segments exactly as they appear in the token.
    secret : str or bytes
        Text secrets are UTF-8 encoded.

    Returns
    -------
    bytes
        The 32-byte HMAC-SHA256 digest.

    """
    signing_input = f'{encoded_header}.{encoded_claims}'.encode('utf-8')
    return hmac.new(_key(secret), signing_input, hashlib.sha256).digest()


def verify(token: str, secret: Secret) -> bool:
    """
    Check that ``token`` carries a valid signature for ``secret``.

    Never raises: a malformed token, an undecodable signature, or a
    mismatch all yield ``False``. The digests are compared with
    :func:`hmac.compare_digest`.
    """
    try:
        encoded_header, encoded_claims, encoded_signature = tokens.parse(token)
    except MalformedToken as e:
        logger.debug('Cannot verify: %s', e)
        return False
    expected = sign(encoded_header, encoded_claims, secret)
    try:
        actual = codec.decode(encoded_signature)
    except DecodeError as e:
        logger.debug('Cannot verify: %s', e)
        return False
    return hmac.compare_digest(expected, actual)
