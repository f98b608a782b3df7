"""Tests for :mod:`tokenauth.credentials.util`."""

import tempfile
from unittest import TestCase

from flask import Flask
from sqlalchemy import text

from .. import models, util
from ..exceptions import Unavailable
from .util import temporary_db


class TestTransaction(TestCase):
    """Units of work on the credential database."""

    def test_commit(self):
        """Pending changes are committed when the block exits."""
        with temporary_db() as session:
            with util.transaction() as inner:
                inner.add(models.DBUser(username='alice', password='foohash',
                                        display_name='Alice A.'))
            self.assertFalse(session.new)
            session.rollback()
            self.assertEqual(session.query(models.DBUser).count(), 1)

    def test_rollback(self):
        """Changes are discarded if the block raises."""
        with temporary_db() as session:
            with self.assertRaises(KeyError):
                with util.transaction() as inner:
                    inner.add(models.DBUser(username='alice',
                                            password='foohash',
                                            display_name='Alice A.'))
                    raise KeyError('alice')
            self.assertEqual(session.query(models.DBUser).count(), 0)

    def test_database_error(self):
        """Database errors surface as :class:`.Unavailable`."""
        with temporary_db() as session:
            with self.assertRaises(Unavailable):
                with util.transaction() as inner:
                    inner.execute(text('SELECT * FROM nonexistent'))
            # The session is usable again afterwards.
            self.assertEqual(session.query(models.DBUser).count(), 0)


class TestIsAvailable(TestCase):
    """The health check reports whether the database answers."""

    def test_available(self):
        """An in-memory database answers."""
        with temporary_db():
            self.assertTrue(util.is_available())

    def test_unavailable(self):
        """A database that cannot be opened does not."""
        with tempfile.TemporaryDirectory() as tmp:
            app = Flask('foo')
            app.config['SQLALCHEMY_DATABASE_URI'] = \
                f'sqlite:///{tmp}/missing/dir/users.db'
            with app.app_context():
                util.init_app(app)
                self.assertFalse(util.is_available())
