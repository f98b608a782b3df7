"""URL-safe base64 without padding, as used in each token segment."""

import base64
import binascii

from .exceptions import DecodeError

_TO_URLSAFE = str.maketrans('+/', '-_')
_FROM_URLSAFE = str.maketrans('-_', '+/')


def encode(data: bytes) -> str:
    """Encode ``data`` as padding-free base64url."""
    encoded = base64.b64encode(data).decode('ascii')
    return encoded.translate(_TO_URLSAFE).rstrip('=')


def decode(data: str) -> bytes:
    """
    Decode a base64url string, with or without padding.

    Only the canonical encoding of a byte string is accepted: a final
    character whose unused low bits are set would otherwise decode to the
    same bytes as its canonical neighbour.

    Raises
    ------
    :class:`.DecodeError`
        Raised if ``data`` is not valid base64 once padding is restored.

    """
    standard = data.translate(_FROM_URLSAFE)
    standard += '=' * (-len(standard) % 4)
    try:
        decoded = base64.b64decode(standard.encode('ascii'), validate=True)
    except (binascii.Error, UnicodeEncodeError) as e:
        raise DecodeError(f'Not valid base64url: {e}') from e
    if encode(decoded) != data.rstrip('='):
        raise DecodeError('Not the canonical base64url encoding')
    return decoded
