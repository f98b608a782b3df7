"""
Credential stores consulted by the login and registration flows.

:class:`CredentialStore` is the interface :mod:`.accounts` relies on;
:class:`SQLCredentialStore` implements it on the Flask-SQLAlchemy database
configured with :func:`.util.init_app`.
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError

from . import passwords, util
from .exceptions import PasswordAuthenticationFailed, UsernameTaken
from .models import DBUser
from .. import domain

logger = logging.getLogger(__name__)


class CredentialStore(object):
    """Lookup and creation of user credentials."""

    def __init__(self, rounds: int = 12) -> None:
        """Set the bcrypt cost used by :meth:`.hash_password`."""
        self.rounds = rounds

    def find_by_username(self, username: str) -> Optional[domain.Credential]:
        """
        Get the stored credential for ``username``, if any.

        Raises
        ------
        :class:`.Unavailable`
            Raised if the store cannot be reached.

        """
        raise NotImplementedError('Implemented in a subclass')

    def create_user(self, username: str, password_hash: str,
                    display_name: str) -> None:
        """
        Store a new credential.

        Raises
        ------
        :class:`.UsernameTaken`
            Raised if ``username`` is already stored.
        :class:`.Unavailable`
            Raised if the store cannot be reached.

        """
        raise NotImplementedError('Implemented in a subclass')

    def hash_password(self, password: str) -> str:
        """Hash a password for storage with :meth:`.create_user`."""
        return passwords.hash_password(password, rounds=self.rounds)

    def placeholder_hash(self) -> str:
        """Get a hash to check passwords against when there is no user."""
        return passwords.placeholder_hash(self.rounds)

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Check a password against a stored hash."""
        try:
            passwords.check_password(password, password_hash)
        except PasswordAuthenticationFailed:
            return False
        return True


class SQLCredentialStore(CredentialStore):
    """Credentials in the ``users`` table. Requires an app context."""

    def find_by_username(self, username: str) -> Optional[domain.Credential]:
        """Get the stored credential for ``username``, if any."""
        with util.transaction() as session:
            db_user: Optional[DBUser] = session.query(DBUser) \
                .filter(DBUser.username == username) \
                .first()
            if db_user is None:
                return None
            return db_user.to_domain()

    def create_user(self, username: str, password_hash: str,
                    display_name: str) -> None:
        """Store a new credential."""
        if self.find_by_username(username) is not None:
            raise UsernameTaken(f'User {username} already exists')
        db_user = DBUser(username=username, password=password_hash,
                         display_name=display_name)
        with util.transaction() as session:
            session.add(db_user)
            try:
                session.commit()
            except IntegrityError as e:
                # Lost a race with another registration for this username.
                session.rollback()
                raise UsernameTaken(f'User {username} already exists') from e
        logger.info('Created user %s', username)
