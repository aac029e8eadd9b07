from __future__ import annotations

from typing import Optional, Protocol

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): the service layer depends on this interface, not on the storage backend.
    """

    def get_by_username(self, username: str) -> Optional[User]:
        """Case-insensitive lookup."""
        raise NotImplementedError

    def create_user(self, *, username: str, password_hash: str, role: Role) -> User:
        """Insert a user; raises DuplicateUsernameError if the name is taken."""
        raise NotImplementedError
