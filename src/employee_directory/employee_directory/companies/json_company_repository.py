from __future__ import annotations

import uuid
from typing import Any, Dict, Sequence

from ..core.exceptions import DuplicateNameError
from ..storage.snapshot import JsonSnapshotStore
from .model import Company
from .repository import CompanyRepository


def _to_company(row: Dict[str, Any]) -> Company:
    return Company(company_id=str(row["id"]), name=str(row.get("name", "")))


class JsonCompanyRepository(CompanyRepository):
    def __init__(self, store: JsonSnapshotStore):
        self._store = store

    def list_all(self) -> Sequence[Company]:
        return [_to_company(r) for r in self._store.load().companies]

    def create(self, *, name: str) -> Company:
        key = name.casefold()
        with self._store.transaction() as snapshot:
            if any(str(r.get("name", "")).strip().casefold() == key for r in snapshot.companies):
                raise DuplicateNameError(f"Company '{name}' already exists")
            row = {"id": str(uuid.uuid4()), "name": name}
            snapshot.companies.append(row)
        return _to_company(row)

    def delete_cascade(self, company_id: str) -> int:
        with self._store.transaction() as snapshot:
            remaining = [r for r in snapshot.companies if r.get("id") != company_id]
            if len(remaining) == len(snapshot.companies):
                return -1
            snapshot.companies = remaining
            kept = [e for e in snapshot.employees if e.get("companyId") != company_id]
            removed = len(snapshot.employees) - len(kept)
            snapshot.employees = kept
        return removed
