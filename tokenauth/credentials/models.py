"""Credential database models."""

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import Column, String

from .. import domain

db: SQLAlchemy = SQLAlchemy()


class DBUser(db.Model):  # type: ignore
    """
    A user and their password hash.

    +--------------+--------------+------+-----+---------+-------+
    | Field        | Type         | Null | Key | Default | Extra |
    +--------------+--------------+------+-----+---------+-------+
    | username     | varchar(255) | NO   | PRI | NULL    |       |
    | password     | varchar(255) | NO   |     | NULL    |       |
    | display_name | varchar(255) | NO   |     | NULL    |       |
    +--------------+--------------+------+-----+---------+-------+
    """

    __tablename__ = 'users'

    username = Column(String(255), primary_key=True)
    password = Column(String(255), nullable=False)
    display_name = Column(String(255), nullable=False)

    def to_domain(self) -> domain.Credential:
        """Generate a :class:`.domain.Credential` from this row."""
        return domain.Credential(username=self.username,
                                 password_hash=self.password,
                                 display_name=self.display_name)
