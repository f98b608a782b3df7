"""Provides tools for issuing and checking bearer tokens on requests."""

import logging
from typing import Optional

from flask import Flask, request, current_app

from . import codec, decorators, exceptions, signing, tokens
from .authenticator import Authenticator, authenticate, extract
from .issuer import DEFAULT_TTL, TokenIssuer, issue

logger = logging.getLogger(__name__)


class Auth(object):
    """
    Attaches authentication information to the request.

    Intended for use in a Flask application factory, for example:

    .. code-block:: python

       from flask import Flask
       from tokenauth.auth import Auth
       from someapp import routes


       def create_web_app() -> Flask:
          app = Flask('someapp')
          app.config.from_pyfile('config.py')
          Auth(app)
          app.register_blueprint(routes.blueprint)
          return app

    On every request the ``Authorization`` header is checked against
    ``JWT_SECRET``. The outcome is available to views as ``request.auth``
    (a :class:`.domain.AuthenticatedUser`, or ``None``) and
    ``request.auth_error`` (the :class:`.TokenError` explaining why
    ``request.auth`` is ``None``).
    """

    def __init__(self, app: Optional[Flask] = None) -> None:
        """
        Initialize ``app`` with the request hook.

        Parameters
        ----------
        app : :class:`Flask`

        """
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """
        Attach :meth:`.load_auth` to the Flask app.

        Parameters
        ----------
        app : :class:`Flask`

        """
        self.app = app
        self.app.config.setdefault('JWT_SECRET', None)
        self.app.before_request(self.load_auth)

    def load_auth(self) -> None:
        """Authenticate the request, and attach the result to it."""
        request.auth = None
        request.auth_error = None

        # Unauthenticated requests to public views are fine; only fail here
        # if there is something to check the header against.
        secret = current_app.config.get('JWT_SECRET')
        header = request.headers.get('Authorization')
        if not secret:
            if header is not None:
                logger.error('JWT_SECRET is not set; cannot check tokens')
            request.auth_error = exceptions.ConfigurationError(
                'JWT_SECRET is not set'
            )
            return
        try:
            request.auth = Authenticator(secret).authenticate(header)
        except exceptions.TokenError as e:
            request.auth_error = e
