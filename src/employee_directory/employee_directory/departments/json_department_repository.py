from __future__ import annotations

import uuid
from typing import Any, Dict, Sequence

from ..core.exceptions import DuplicateNameError
from ..storage.snapshot import JsonSnapshotStore
from .model import Department
from .repository import DepartmentRepository


def _to_department(row: Dict[str, Any]) -> Department:
    return Department(dept_id=str(row["id"]), dept_name=str(row.get("name", "")))


class JsonDepartmentRepository(DepartmentRepository):
    def __init__(self, store: JsonSnapshotStore):
        self._store = store

    def list_all(self) -> Sequence[Department]:
        return [_to_department(r) for r in self._store.load().departments]

    def create(self, *, dept_name: str) -> Department:
        key = dept_name.casefold()
        with self._store.transaction() as snapshot:
            if any(str(r.get("name", "")).strip().casefold() == key for r in snapshot.departments):
                raise DuplicateNameError(f"Department '{dept_name}' already exists")
            row = {"id": str(uuid.uuid4()), "name": dept_name}
            snapshot.departments.append(row)
        return _to_department(row)

    def delete_orphaning(self, dept_id: str) -> int:
        with self._store.transaction() as snapshot:
            remaining = [r for r in snapshot.departments if r.get("id") != dept_id]
            if len(remaining) == len(snapshot.departments):
                return -1
            snapshot.departments = remaining
            orphaned = 0
            for employee in snapshot.employees:
                if employee.get("departmentId") == dept_id:
                    employee["departmentId"] = None
                    orphaned += 1
        return orphaned
