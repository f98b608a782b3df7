"""Database session handling for the credential store."""

import logging
from contextlib import contextmanager
from typing import Generator

from flask import Flask
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm.session import Session

from .exceptions import Unavailable
from .models import db

logger = logging.getLogger(__name__)


@contextmanager
def transaction() -> Generator[Session, None, None]:
    """
    Run a unit of work on the credential database.

    Pending changes are committed when the block exits cleanly, and rolled
    back if it raises.

    Raises
    ------
    :class:`.Unavailable`
        Raised in place of any database error from the block or the commit.

    """
    session = db.session
    try:
        yield session
        if session.new or session.dirty or session.deleted:
            session.commit()
    except SQLAlchemyError as e:
        logger.error('Database error, rolling back: %s', e)
        session.rollback()
        raise Unavailable(f'Credential database error: {e}') from e
    except Exception:
        session.rollback()
        raise


def init_app(app: Flask) -> None:
    """Attach the credential database to ``app``."""
    app.config.setdefault('SQLALCHEMY_TRACK_MODIFICATIONS', False)
    db.init_app(app)


def create_all() -> None:
    """Create the credential tables."""
    db.create_all()


def drop_all() -> None:
    """Drop the credential tables."""
    db.drop_all()


def is_available() -> bool:
    """Check that the credential database answers."""
    try:
        with transaction() as session:
            session.execute(text('SELECT 1'))
    except Unavailable:
        return False
    return True
