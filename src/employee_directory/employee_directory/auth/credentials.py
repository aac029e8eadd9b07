from __future__ import annotations

import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional

from jose import JWTError, jwt
from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import now_utc, to_epoch_seconds
from ..core.constants import DEFAULT_TOKEN_TTL_HOURS, TOKEN_ALGORITHM
from ..core.enums import Role
from ..core.exceptions import ExpiredTokenError, InvalidTokenError


@dataclass(frozen=True)
class Identity:
    """Who the caller is, as embedded in the token at issuance."""

    user_id: str
    username: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


class PasswordHasher:
    """Salted adaptive-cost password hashing (werkzeug)."""

    def __init__(self, method: str = "scrypt"):
        self._method = method
        self._dummy_hash: Optional[str] = None

    def hash(self, password: str) -> str:
        return generate_password_hash(password, method=self._method)

    @property
    def dummy_hash(self) -> str:
        """Hash of a random throwaway password, made with this hasher's method."""
        if self._dummy_hash is None:
            self._dummy_hash = self.hash(secrets.token_hex(16))
        return self._dummy_hash

    def verify(self, password: str, password_hash: str) -> bool:
        if not password_hash:
            return False
        try:
            return check_password_hash(password_hash, password)
        except ValueError:
            # e.g. hashes written by another tool or corrupted values
            return False


class TokenService:
    """Issue and verify signed bearer tokens.

    Verification never re-reads the user record: role and username are
    whatever they were when the token was issued.
    """

    def __init__(
        self,
        secret: str,
        *,
        ttl: timedelta = timedelta(hours=DEFAULT_TOKEN_TTL_HOURS),
        clock: Callable[[], datetime] = now_utc,
        algorithm: str = TOKEN_ALGORITHM,
    ):
        if not secret:
            raise ValueError("Token secret must not be empty")
        self._secret = secret
        self._ttl = ttl
        self._clock = clock
        self._algorithm = algorithm

    def issue(self, identity: Identity) -> str:
        issued_at = self._clock()
        claims = {
            "id": identity.user_id,
            "username": identity.username,
            "role": identity.role.value,
            "iat": to_epoch_seconds(issued_at),
            "exp": to_epoch_seconds(issued_at + self._ttl),
        }
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> Identity:
        if not token:
            raise InvalidTokenError("Invalid token")
        try:
            # Expiry is checked below against the injected clock.
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"verify_exp": False, "verify_iat": False},
            )
        except JWTError as exc:
            raise InvalidTokenError("Invalid token") from exc

        expires_at = claims.get("exp")
        if not isinstance(expires_at, int):
            raise InvalidTokenError("Invalid token")
        if to_epoch_seconds(self._clock()) >= expires_at:
            raise ExpiredTokenError("Token expired")

        user_id = claims.get("id")
        username = claims.get("username")
        if not isinstance(user_id, str) or not isinstance(username, str):
            raise InvalidTokenError("Invalid token")
        try:
            role = Role(claims.get("role"))
        except ValueError as exc:
            raise InvalidTokenError("Invalid token") from exc

        return Identity(user_id=user_id, username=username, role=role)
