"""
Protection of Flask routes that require an authenticated user.

Here's an example of how you might use this in a Flask application:

.. code-block:: python

   from tokenauth.auth.decorators import authenticated


   @blueprint.route('/profile', methods=['GET'])
   @authenticated
   def profile():
       return jsonify(username=request.auth.username)

The application must have :class:`tokenauth.auth.Auth` installed. When the
request is not authenticated, the :class:`.TokenError` recorded by the
extension is raised from the decorated view, so the application's error
handlers decide how to present it.
"""

from functools import wraps
from typing import Any, Callable
import logging

from flask import request

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def authenticated(func: Callable) -> Callable:
    """Require ``request.auth`` before calling ``func``."""
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        """
        Check the authentication outcome before executing the view.

        Raises
        ------
        :class:`.TokenError`
            Raised when the request did not carry a valid token.
        :class:`.ConfigurationError`
            Raised when the application has no signing secret.

        """
        if getattr(request, 'auth', None) is not None:
            return func(*args, **kwargs)
        error = getattr(request, 'auth_error', None)
        if error is None:
            raise ConfigurationError('Auth extension is not installed')
        logger.debug('Request not authenticated: %s', error)
        raise error
    return wrapper
