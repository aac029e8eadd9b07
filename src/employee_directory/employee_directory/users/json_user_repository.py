from __future__ import annotations

import uuid
from typing import Any, Dict, Optional

from ..core.enums import Role
from ..core.exceptions import DuplicateUsernameError
from ..storage.snapshot import JsonSnapshotStore, Snapshot
from .model import User
from .repository import UserRepository


def _to_user(row: Dict[str, Any]) -> User:
    return User(
        user_id=str(row["id"]),
        username=str(row.get("username", "")),
        password_hash=str(row.get("passwordHash") or ""),
        role=Role(row.get("role", Role.USER.value)),
    )


def _find_by_username(snapshot: Snapshot, username: str) -> Optional[Dict[str, Any]]:
    key = username.casefold()
    for row in snapshot.users:
        if str(row.get("username", "")).casefold() == key:
            return row
    return None


class JsonUserRepository(UserRepository):
    def __init__(self, store: JsonSnapshotStore):
        self._store = store

    def get_by_username(self, username: str) -> Optional[User]:
        row = _find_by_username(self._store.load(), username)
        return _to_user(row) if row else None

    def create_user(self, *, username: str, password_hash: str, role: Role) -> User:
        with self._store.transaction() as snapshot:
            if _find_by_username(snapshot, username):
                raise DuplicateUsernameError("Username already exists")
            row = {
                "id": str(uuid.uuid4()),
                "username": username,
                "passwordHash": password_hash,
                "role": role.value,
            }
            snapshot.users.append(row)
        return _to_user(row)
