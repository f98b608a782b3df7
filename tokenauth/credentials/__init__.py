"""
Verification of usernames and passwords, and creation of new users.

Successful logins and registrations are answered with a token from
:mod:`tokenauth.auth`. Credentials are looked up through a
:class:`.store.CredentialStore`; the bundled :class:`.store.SQLCredentialStore`
uses the database attached with :func:`.util.init_app`.
"""

from . import accounts, exceptions, models, passwords, store, util
from .accounts import login, register
from .store import CredentialStore, SQLCredentialStore
from .util import create_all, init_app, drop_all
