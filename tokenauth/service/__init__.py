"""
HTTP service for logging in, registering and validating tokens.

Endpoints, all answering ``{"success": bool, "message": str, ...}``:

- ``POST /login`` with form fields ``username`` and ``password``. Answers
  with a ``jwt`` on success.
- ``POST /register`` with ``username``, ``password`` and optionally
  ``display_name``. Answers with a ``jwt`` on success.
- ``GET|POST /validate`` (also ``/auth``) with an ``Authorization: Bearer``
  header. Answers with the ``user`` carried by the token.

Authentication failures answer 401, bad input 400, a taken username 409,
and anything wrong on the server side 500 with a generic message.
"""
