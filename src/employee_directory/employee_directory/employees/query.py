from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from ..storage.snapshot import JsonSnapshotStore, Snapshot
from .model import Employee, EnrichedEmployee


@dataclass(frozen=True)
class CompanyScope:
    """Employees of one company (or all), with the company name when it resolves."""

    company_id: Optional[str]
    company_name: Optional[str]
    employees: List[EnrichedEmployee]


def _names_by_id(records) -> Dict[str, str]:
    return {str(r.get("id")): str(r.get("name") or "") for r in records}


def _matches_search(employee: Employee, department_name: str, term: str) -> bool:
    needle = term.lower()
    if needle in employee.full_name.lower():
        return True
    # Phone is matched on the raw value, no normalization.
    if term in employee.phone:
        return True
    return bool(department_name) and needle in department_name.lower()


def filter_employees(
    snapshot: Snapshot,
    *,
    company_id: Optional[str] = None,
    search: Optional[str] = None,
) -> List[EnrichedEmployee]:
    """Filter and enrich in store order. Both filters are optional and ANDed."""
    companies = _names_by_id(snapshot.companies)
    departments = _names_by_id(snapshot.departments)

    out: List[EnrichedEmployee] = []
    for row in snapshot.employees:
        employee = Employee.from_record(row)
        if company_id and employee.company_id != company_id:
            continue
        department_name = departments.get(employee.department_id or "", "")
        if search and not _matches_search(employee, department_name, search):
            continue
        out.append(
            EnrichedEmployee(
                employee=employee,
                company_name=companies.get(employee.company_id, ""),
                department_name=department_name,
            )
        )
    return out


class EmployeeQueryService:
    """Read side: every call works on one freshly loaded snapshot."""

    def __init__(self, store: JsonSnapshotStore):
        self._store = store

    def list_employees(self, *, company_id: Optional[str] = None, search: Optional[str] = None) -> List[EnrichedEmployee]:
        return filter_employees(self._store.load(), company_id=company_id, search=search)

    def company_scope(self, company_id: Optional[str] = None) -> CompanyScope:
        snapshot = self._store.load()
        company_name = None
        if company_id:
            company_name = _names_by_id(snapshot.companies).get(company_id)
        return CompanyScope(
            company_id=company_id or None,
            company_name=company_name,
            employees=filter_employees(snapshot, company_id=company_id),
        )
