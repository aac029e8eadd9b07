from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterator, List

from ..core.constants import SNAPSHOT_COLLECTIONS
from ..core.exceptions import StorageError

LOGGER = logging.getLogger(__name__)

Record = Dict[str, Any]


@dataclass
class Snapshot:
    """All four record sets as stored on disk (camelCase record dicts)."""

    companies: List[Record] = field(default_factory=list)
    departments: List[Record] = field(default_factory=list)
    users: List[Record] = field(default_factory=list)
    employees: List[Record] = field(default_factory=list)

    @classmethod
    def from_document(cls, document: Any) -> "Snapshot":
        if not isinstance(document, dict):
            raise StorageError("Snapshot document must be a JSON object")
        collections: Dict[str, List[Record]] = {}
        for name in SNAPSHOT_COLLECTIONS:
            items = document.get(name, [])
            if not isinstance(items, list):
                raise StorageError(f"Snapshot collection '{name}' must be a list")
            if not all(isinstance(item, dict) for item in items):
                raise StorageError(f"Snapshot collection '{name}' must hold only objects")
            collections[name] = [dict(item) for item in items]
        for user in collections["users"]:
            # Older data files keep the hash under "password".
            if "passwordHash" not in user and "password" in user:
                user["passwordHash"] = user.pop("password")
        return cls(**collections)

    def to_document(self) -> Dict[str, List[Record]]:
        return {name: [dict(item) for item in getattr(self, name)] for name in SNAPSHOT_COLLECTIONS}


class JsonSnapshotStore:
    """Single-file JSON store.

    Every write replaces the whole document. Writers are serialized by a
    per-instance lock; readers never lock and always see a complete file
    because saves go through a temp file + ``os.replace``.
    """

    def __init__(self, path: Path):
        self._path = Path(path)
        self._write_lock = threading.RLock()

    @property
    def path(self) -> Path:
        return self._path

    def initialize(self) -> bool:
        """Create an empty snapshot file if none exists. Returns True if created."""
        with self._write_lock:
            if self._path.exists():
                return False
            self.save(Snapshot())
            LOGGER.info("Initialized empty directory store at %s", self._path)
            return True

    def load(self) -> Snapshot:
        if not self._path.exists():
            return Snapshot()
        try:
            with open(self._path, "r", encoding="utf-8") as handle:
                document = json.load(handle)
        except (OSError, json.JSONDecodeError) as exc:
            LOGGER.error("Failed to read directory store %s: %s", self._path, exc)
            raise StorageError(f"Cannot read directory store: {exc}") from exc
        return Snapshot.from_document(document)

    def save(self, snapshot: Snapshot) -> None:
        payload = json.dumps(snapshot.to_document(), indent=2, ensure_ascii=False)
        tmp_name = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=".snapshot-", suffix=".tmp", dir=str(self._path.parent))
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self._path)
            tmp_name = None
        except OSError as exc:
            LOGGER.error("Failed to write directory store %s: %s", self._path, exc)
            raise StorageError(f"Cannot write directory store: {exc}") from exc
        finally:
            if tmp_name and os.path.exists(tmp_name):
                os.remove(tmp_name)

    @contextmanager
    def transaction(self) -> Iterator[Snapshot]:
        """Load -> mutate -> save under the write lock.

        Nothing is written if the block raises or leaves the snapshot unchanged.
        """
        with self._write_lock:
            snapshot = self.load()
            before = snapshot.to_document()
            yield snapshot
            if snapshot.to_document() != before:
                self.save(snapshot)
