from __future__ import annotations

import logging

from ..auth.credentials import Identity, PasswordHasher, TokenService
from ..common.validators import require_min_length, require_non_empty, require_pattern
from ..core.constants import MIN_PASSWORD_LENGTH, MIN_USERNAME_LENGTH
from ..core.enums import Role
from ..core.exceptions import InvalidCredentialsError
from .model import AuthResult, User
from .repository import UserRepository

LOGGER = logging.getLogger(__name__)

USERNAME_PATTERN = r"[A-Za-z0-9_]+"


class AuthService:
    """Use cases: register and log in."""

    def __init__(self, users: UserRepository, hasher: PasswordHasher, tokens: TokenService):
        self._users = users
        self._hasher = hasher
        self._tokens = tokens

    def _issue(self, user: User) -> AuthResult:
        identity = Identity(user_id=user.user_id, username=user.username, role=user.role)
        return AuthResult(token=self._tokens.issue(identity), user=user)

    def register(self, username: str, password: str) -> AuthResult:
        username = require_non_empty(username, "username")
        require_min_length(username, "username", MIN_USERNAME_LENGTH)
        require_pattern(
            username,
            "username",
            USERNAME_PATTERN,
            "Username may contain only letters, digits and underscore",
        )
        password = require_min_length(password, "password", MIN_PASSWORD_LENGTH)

        user = self._users.create_user(
            username=username,
            password_hash=self._hasher.hash(password),
            role=Role.USER,
        )
        LOGGER.info("Registered user %s (%s)", user.username, user.user_id)
        return self._issue(user)

    def authenticate(self, username: str, password: str) -> AuthResult:
        user = self._users.get_by_username(username or "")
        # Same error for unknown user and wrong password; unknown names still
        # pay for one hash check.
        password_hash = user.password_hash if user else self._hasher.dummy_hash
        if not self._hasher.verify(password or "", password_hash) or user is None:
            LOGGER.warning("Failed login for username %r", username)
            raise InvalidCredentialsError("Invalid credentials")
        return self._issue(user)
