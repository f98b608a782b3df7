"""Login, registration and token validation endpoints."""

import logging
from http import HTTPStatus

from flask import Blueprint, current_app, jsonify, request

from .. import domain
from ..auth import TokenIssuer
from ..auth.decorators import authenticated
from ..auth.exceptions import ConfigurationError
from ..credentials import accounts, util
from ..credentials.store import SQLCredentialStore

logger = logging.getLogger(__name__)

blueprint = Blueprint('tokenauth', __name__, url_prefix='')


def _issuer() -> TokenIssuer:
    secret = current_app.config.get('JWT_SECRET')
    if not secret:
        raise ConfigurationError('JWT_SECRET is not set')
    return TokenIssuer(secret, ttl=int(current_app.config['TOKEN_TTL']))


def _store() -> SQLCredentialStore:
    return SQLCredentialStore(rounds=int(current_app.config['BCRYPT_ROUNDS']))


@blueprint.route('/status', methods=['GET'])
def ok() -> tuple:
    """Health check endpoint."""
    if not util.is_available():
        return jsonify({'status': 'unavailable'}), \
            HTTPStatus.SERVICE_UNAVAILABLE
    return jsonify({'status': 'ok'}), HTTPStatus.OK


@blueprint.route('/login', methods=['POST'])
def login() -> tuple:
    """Exchange a username and password for a token."""
    token = accounts.login(_store(), _issuer(),
                           request.form.get('username'),
                           request.form.get('password'))
    return jsonify(success=True, message='Login successful!', jwt=token), \
        HTTPStatus.OK


@blueprint.route('/register', methods=['POST'])
def register() -> tuple:
    """Create a user, and answer with a token for them."""
    token = accounts.register(_store(), _issuer(),
                              request.form.get('username'),
                              request.form.get('password'),
                              request.form.get('display_name'))
    return jsonify(success=True, message='User registered successfully!',
                   jwt=token), HTTPStatus.OK


@blueprint.route('/validate', methods=['GET', 'POST'])
@blueprint.route('/auth', methods=['GET', 'POST'])
@authenticated
def validate() -> tuple:
    """Check the bearer token on the request."""
    return jsonify(success=True, message='Token is valid.',
                   user=domain.to_dict(request.auth)), HTTPStatus.OK
