"""Flask configuration for the token service."""

import os

JWT_SECRET = os.environ.get('JWT_SECRET')
"""Shared signing secret. Token endpoints answer 500 until this is set."""

TOKEN_TTL = int(os.environ.get('TOKEN_TTL', '1209600'))
"""Lifetime of issued tokens, in seconds. Defaults to 14 days."""

BCRYPT_ROUNDS = int(os.environ.get('BCRYPT_ROUNDS', '12'))
"""Cost factor for new password hashes."""

SQLALCHEMY_DATABASE_URI = os.environ.get('SQLALCHEMY_DATABASE_URI',
                                         'sqlite:///tokenauth.db')
SQLALCHEMY_TRACK_MODIFICATIONS = False

LOGLEVEL = os.environ.get('LOGLEVEL', 'INFO')
LOG_JSON = os.environ.get('LOG_JSON', '0')
"""Set to ``'1'`` for one JSON object per log record."""
