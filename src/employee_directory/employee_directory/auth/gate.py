from __future__ import annotations

import logging
from functools import wraps
from typing import Optional

from flask import g, request

from ..core.exceptions import (
    AdminRequiredError,
    AuthenticationError,
    InvalidTokenError,
    MissingTokenError,
)
from .credentials import Identity, TokenService

LOGGER = logging.getLogger(__name__)


def extract_bearer_token(header_value: Optional[str]) -> str:
    """Return the token from an ``Authorization`` header value.

    Raises MissingTokenError when there is nothing to verify and
    InvalidTokenError when the scheme is not ``Bearer``.
    """
    if not header_value or not header_value.strip():
        raise MissingTokenError("Authorization token required")
    parts = header_value.strip().split(None, 1)
    if len(parts) < 2 or not parts[1].strip():
        raise MissingTokenError("Authorization token required")
    scheme, token = parts[0], parts[1].strip()
    if scheme.lower() != "bearer":
        raise InvalidTokenError("Invalid token")
    return token


class AccessGate:
    """Flask decorators guarding the API views."""

    def __init__(self, tokens: TokenService):
        self._tokens = tokens

    def authenticate_request(self) -> Identity:
        try:
            token = extract_bearer_token(request.headers.get("Authorization"))
            identity = self._tokens.verify(token)
        except AuthenticationError as e:
            LOGGER.warning("Rejected %s %s: %s", request.method, request.path, type(e).__name__)
            raise
        g.identity = identity
        return identity

    def token_required(self, view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            self.authenticate_request()
            return view(*args, **kwargs)

        return wrapper

    def admin_required(self, view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            identity = self.authenticate_request()
            if not identity.is_admin:
                LOGGER.warning(
                    "Rejected %s %s: user %s is not admin", request.method, request.path, identity.username
                )
                raise AdminRequiredError("Admin access required")
            return view(*args, **kwargs)

        return wrapper
