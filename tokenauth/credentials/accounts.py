"""Login and registration: verify credentials, then issue a token."""

import logging
from typing import Optional

from ..auth.issuer import TokenIssuer
from .exceptions import AuthenticationFailed, NoSuchUser, \
    PasswordAuthenticationFailed, ValidationFailed, UsernameTaken
from .store import CredentialStore

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = 'Invalid username or password.'


def _clean(username: Optional[str], password: Optional[str]) -> tuple:
    username = (username or '').strip()
    password = (password or '').strip()
    if not username or not password:
        raise ValidationFailed('Username and password are required.')
    return username, password


def login(store: CredentialStore, issuer: TokenIssuer,
          username: Optional[str], password: Optional[str]) -> str:
    """
    Validate username/password. If successful, issue a token.

    Parameters
    ----------
    store : :class:`.CredentialStore`
    issuer : :class:`.TokenIssuer`
    username : str
    password : str
        Password (as entered). Surrounding whitespace is ignored.

    Returns
    -------
    str
        A signed token carrying ``username`` and ``display_name``.

    Raises
    ------
    :class:`.ValidationFailed`
        Raised if username or password is empty.
    :class:`.AuthenticationFailed`
        Raised if the user does not exist or the password is incorrect. The
        message is the same in both cases.
    :class:`.Unavailable`
        Raised if the credential store cannot be reached.

    """
    username, password = _clean(username, password)
    try:
        credential = store.find_by_username(username)
        if credential is None:
            # Unknown users cost one bcrypt check, like known ones.
            store.verify_password(password, store.placeholder_hash())
            raise NoSuchUser('User does not exist')
        if not store.verify_password(password, credential.password_hash):
            raise PasswordAuthenticationFailed('Incorrect password')
    except (NoSuchUser, PasswordAuthenticationFailed) as e:
        logger.debug('Login failed for %s: %s', username, e)
        raise AuthenticationFailed(INVALID_CREDENTIALS) from e
    return issuer.issue({'username': credential.username,
                         'display_name': credential.display_name})


def register(store: CredentialStore, issuer: TokenIssuer,
             username: Optional[str], password: Optional[str],
             display_name: Optional[str] = None) -> str:
    """
    Create a new user, and issue a token for them.

    Parameters
    ----------
    store : :class:`.CredentialStore`
    issuer : :class:`.TokenIssuer`
    username : str
    password : str
    display_name : str
        Defaults to ``username`` if absent or blank.

    Returns
    -------
    str
        A signed token, exactly as :func:`.login` would issue it.

    Raises
    ------
    :class:`.ValidationFailed`
        Raised if username or password is empty, or the password is too long.
    :class:`.UsernameTaken`
        Raised if the username is already registered.
    :class:`.Unavailable`
        Raised if the credential store cannot be reached.

    """
    username, password = _clean(username, password)
    if store.find_by_username(username) is not None:
        raise UsernameTaken(f'User {username} already exists')
    display_name = (display_name or '').strip() or username

    store.create_user(username, store.hash_password(password), display_name)
    logger.info('Registered user %s', username)
    return issuer.issue({'username': username,
                         'display_name': display_name})
