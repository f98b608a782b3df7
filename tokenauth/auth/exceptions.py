"""Exceptions raised while issuing or checking bearer tokens."""


class DecodeError(ValueError):
    """A string is not valid base64url."""


class ConfigurationError(RuntimeError):
    """The signing secret is not configured."""


class TokenError(RuntimeError):
    """
    Base for all reasons a request fails token authentication.

    ``reason`` is safe to show to the requester. The exception message may
    carry more detail and is meant for logs only.
    """

    reason = 'Unauthorized'

    def __init__(self, message: str = '') -> None:
        super(TokenError, self).__init__(message or self.reason)


class MissingToken(TokenError):
    """The Authorization header is absent or not of the form ``Bearer x``."""

    reason = 'Unauthorized: No token provided.'


class InvalidToken(TokenError):
    """The token is malformed, or its signature does not match."""

    reason = 'Unauthorized: Invalid token.'


class MalformedToken(InvalidToken):
    """The token is not three base64url segments separated by dots."""


class InvalidPayload(TokenError):
    """The claims segment does not decode to a JSON object."""

    reason = 'Unauthorized: Invalid token payload.'


class ExpiredToken(TokenError):
    """The token's ``exp`` claim is in the past."""

    reason = 'Unauthorized: Token has expired.'
