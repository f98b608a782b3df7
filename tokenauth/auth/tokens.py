"""Functions for working with the three-segment token format."""

import json
import re
from datetime import datetime
from typing import Any, Mapping, Tuple

from pytz import UTC

from . import codec
from .exceptions import DecodeError, InvalidPayload, MalformedToken
from .. import domain

TOKEN_PATTERN = re.compile(r'([A-Za-z0-9_-]+)\.([A-Za-z0-9_-]+)\.([A-Za-z0-9_-]+)')
"""Three non-empty base64url segments joined by dots, and nothing else."""

EPOCH = datetime.fromtimestamp(0, tz=UTC)

Segments = Tuple[str, str, str]


def now() -> int:
    """Get the current epoch/unix time."""
    return epoch(datetime.now(tz=UTC))


def epoch(t: datetime) -> int:
    """Convert a :class:`.datetime` to UNIX time."""
    return int((t - EPOCH).total_seconds())


def _dumps(data: Mapping[str, Any]) -> bytes:
    # Compact, in insertion order. Equal mappings give equal bytes.
    return json.dumps(data, separators=(',', ':')).encode('utf-8')


def serialize(header: Mapping[str, Any],
              claims: Mapping[str, Any]) -> Tuple[str, str]:
    """Encode the header and claims as base64url JSON segments."""
    return codec.encode(_dumps(header)), codec.encode(_dumps(claims))


def parse(token: str) -> Segments:
    """
    Split a token into its header, claims and signature segments.

    No decoding is done here; this is a purely structural check.

    Raises
    ------
    :class:`.MalformedToken`
        Raised if the token is not exactly three non-empty segments over
        ``[A-Za-z0-9_-]``.

    """
    match = TOKEN_PATTERN.fullmatch(token) if isinstance(token, str) else None
    if match is None:
        raise MalformedToken('Token must be three base64url segments')
    encoded_header, encoded_claims, encoded_signature = match.groups()
    return encoded_header, encoded_claims, encoded_signature


def _decode_object(segment: str) -> dict:
    try:
        data = json.loads(codec.decode(segment).decode('utf-8'))
    except (DecodeError, UnicodeDecodeError, ValueError) as e:
        raise InvalidPayload(f'Segment is not encoded JSON: {e}') from e
    if not isinstance(data, dict):
        raise InvalidPayload('Segment is not a JSON object')
    return data


def decode_claims(encoded_claims: str) -> domain.Claims:
    """
    Decode the claims segment into a mapping.

    Raises
    ------
    :class:`.InvalidPayload`
        Raised if the segment is not base64url-encoded JSON, or if the JSON
        is not an object.

    """
    return _decode_object(encoded_claims)


def unpack(token: str) -> domain.Token:
    """
    Decode every segment of ``token`` without checking its signature.

    For inspection only. Use :func:`.authenticator.authenticate` to decide
    whether a token can be trusted.
    """
    encoded_header, encoded_claims, encoded_signature = parse(token)
    try:
        signature = codec.decode(encoded_signature)
    except DecodeError as e:
        raise MalformedToken('Signature is not base64url') from e
    return domain.Token(header=_decode_object(encoded_header),
                        claims=decode_claims(encoded_claims),
                        signature=signature)
