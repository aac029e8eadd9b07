from __future__ import annotations

import logging
from typing import Optional

from ..auth.credentials import PasswordHasher
from ..core.enums import Role
from ..users.model import User
from ..users.repository import UserRepository
from .snapshot import JsonSnapshotStore

LOGGER = logging.getLogger(__name__)


def ensure_store(store: JsonSnapshotStore) -> bool:
    """Create the data file with empty collections if it is missing."""
    return store.initialize()


def ensure_admin_user(
    users: UserRepository,
    hasher: PasswordHasher,
    *,
    username: str,
    password: str,
) -> Optional[User]:
    """Seed an admin account. Returns the new user, or None if the username exists.

    Admins are never created through registration; this is the only path.
    """
    if not username or not password:
        LOGGER.warning("Admin seeding skipped: ADMIN_USERNAME/ADMIN_PASSWORD not set")
        return None
    if users.get_by_username(username):
        return None
    user = users.create_user(username=username, password_hash=hasher.hash(password), role=Role.ADMIN)
    LOGGER.info("Seeded admin user %s", user.username)
    return user
