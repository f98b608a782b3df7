"""Exceptions."""


class AuthenticationFailed(RuntimeError):
    """Failed to authenticate user with provided credentials."""


class NoSuchUser(RuntimeError):
    """User does not exist."""


class PasswordAuthenticationFailed(RuntimeError):
    """Password is not correct."""


class ValidationFailed(ValueError):
    """Username or password is missing or unusable."""


class UsernameTaken(RuntimeError):
    """A user with the requested username already exists."""


class Unavailable(RuntimeError):
    """The credential store cannot be reached."""
