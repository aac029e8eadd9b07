from __future__ import annotations

import uuid
from typing import Optional, Sequence

from ..core.exceptions import NotFoundError, ValidationError
from ..storage.snapshot import JsonSnapshotStore, Snapshot
from .model import Employee, EmployeeData
from .repository import EmployeeRepository


def _check_references(snapshot: Snapshot, data: EmployeeData) -> None:
    if not any(c.get("id") == data.company_id for c in snapshot.companies):
        raise ValidationError("Company not found", {"companyId": "unknown company"})
    if data.department_id and not any(d.get("id") == data.department_id for d in snapshot.departments):
        raise ValidationError("Department not found", {"departmentId": "unknown department"})


class JsonEmployeeRepository(EmployeeRepository):
    def __init__(self, store: JsonSnapshotStore):
        self._store = store

    def list_all(self) -> Sequence[Employee]:
        return [Employee.from_record(r) for r in self._store.load().employees]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        for row in self._store.load().employees:
            if row.get("id") == employee_id:
                return Employee.from_record(row)
        return None

    def create(self, data: EmployeeData) -> Employee:
        with self._store.transaction() as snapshot:
            _check_references(snapshot, data)
            employee = Employee.from_data(str(uuid.uuid4()), data)
            snapshot.employees.append(employee.to_record())
        return employee

    def replace(self, employee_id: str, data: EmployeeData) -> Employee:
        with self._store.transaction() as snapshot:
            for index, row in enumerate(snapshot.employees):
                if row.get("id") == employee_id:
                    break
            else:
                raise NotFoundError("Employee not found")
            _check_references(snapshot, data)
            employee = Employee.from_data(employee_id, data)
            snapshot.employees[index] = employee.to_record()
        return employee

    def delete_by_id(self, employee_id: str) -> bool:
        with self._store.transaction() as snapshot:
            kept = [e for e in snapshot.employees if e.get("id") != employee_id]
            removed = len(kept) != len(snapshot.employees)
            snapshot.employees = kept
        return removed
