from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: User.

    Note: Plain data object, no storage access here.
    """

    user_id: str
    username: str
    password_hash: str
    role: Role

    def to_public(self) -> dict:
        return {"id": self.user_id, "username": self.username, "role": self.role.value}


@dataclass(frozen=True)
class AuthResult:
    """What the auth endpoints return: a bearer token and the public user."""

    token: str
    user: User

    def to_dict(self) -> dict:
        return {"token": self.token, "user": self.user.to_public()}
