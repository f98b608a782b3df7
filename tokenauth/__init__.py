"""
Stateless bearer-token authentication.

This package issues and verifies self-contained HS256 tokens that carry a
user's identity claims. The server keeps no session state: a token is valid
for as long as its ``exp`` claim says, and any instance holding the shared
secret can verify it.

Quick start
-----------

Issuing and checking tokens does not need Flask at all:

.. code-block:: python

   from tokenauth.auth import Authenticator, TokenIssuer

   issuer = TokenIssuer(secret)
   token = issuer.issue({'username': 'alice', 'display_name': 'Alice A.'})

   user = Authenticator(secret).authenticate(f'Bearer {token}')
   user.username     # 'alice'

To protect routes in a Flask application, install :class:`.auth.Auth` and
decorate views with :func:`.auth.decorators.authenticated`:

.. code-block:: python

   from tokenauth import auth

   def create_web_app() -> Flask:
       app = Flask('foo')
       app.config['JWT_SECRET'] = ...
       auth.Auth(app)
       return app

The login/registration flow lives in :mod:`.credentials`, and a ready-made
service exposing it over HTTP lives in :mod:`.service`.
"""

from .domain import Token, Credential, AuthenticatedUser, HEADER
