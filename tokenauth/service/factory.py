"""Provides an app factory for the token service."""

import logging
from http import HTTPStatus
from typing import Optional

import click
from flask import Flask, jsonify, Response
from werkzeug.exceptions import HTTPException

from . import config, routes
from .. import auth, credentials
from ..auth.exceptions import ConfigurationError, TokenError
from ..credentials.exceptions import AuthenticationFailed, Unavailable, \
    UsernameTaken, ValidationFailed

logger = logging.getLogger(__name__)


def _failure(message: str, status_code: int) -> Response:
    response = jsonify(success=False, message=message)
    response.status_code = status_code
    return response


def jsonify_exception(error: HTTPException) -> Response:
    exc_resp = error.get_response()
    return _failure(error.description, exc_resp.status_code)


def handle_token_error(error: TokenError) -> Response:
    return _failure(error.reason, HTTPStatus.UNAUTHORIZED)


def handle_authentication_failed(error: AuthenticationFailed) -> Response:
    return _failure(str(error), HTTPStatus.UNAUTHORIZED)


def handle_validation_failed(error: ValidationFailed) -> Response:
    return _failure(str(error), HTTPStatus.BAD_REQUEST)


def handle_username_taken(error: UsernameTaken) -> Response:
    return _failure('This username is already taken.', HTTPStatus.CONFLICT)


def handle_unavailable(error: Unavailable) -> Response:
    logger.error('Credential store failure: %s', error)
    return _failure('An unexpected error occurred.',
                    HTTPStatus.INTERNAL_SERVER_ERROR)


def handle_configuration_error(error: ConfigurationError) -> Response:
    logger.error('Configuration error: %s', error)
    return _failure('Server configuration error.',
                    HTTPStatus.INTERNAL_SERVER_ERROR)


def create_app(overrides: Optional[dict] = None) -> Flask:
    """Initialize an instance of the token service."""
    app = Flask('tokenauth')
    app.config.from_object(config)
    if overrides:
        app.config.from_mapping(overrides)

    credentials.init_app(app)
    auth.Auth(app)

    app.register_blueprint(routes.blueprint)
    app.errorhandler(HTTPException)(jsonify_exception)
    app.errorhandler(TokenError)(handle_token_error)
    app.errorhandler(AuthenticationFailed)(handle_authentication_failed)
    app.errorhandler(ValidationFailed)(handle_validation_failed)
    app.errorhandler(UsernameTaken)(handle_username_taken)
    app.errorhandler(Unavailable)(handle_unavailable)
    app.errorhandler(ConfigurationError)(handle_configuration_error)

    @app.cli.command('create-db')
    def create_db() -> None:
        """Create the credential tables."""
        credentials.create_all()
        click.echo('Created credential tables')

    return app
