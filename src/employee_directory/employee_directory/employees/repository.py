from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, EmployeeData


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    ``create`` and ``replace`` check that companyId (and departmentId when
    set) reference live records in the same write, like a foreign key.
    """

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, data: EmployeeData) -> Employee:
        raise NotImplementedError

    def replace(self, employee_id: str, data: EmployeeData) -> Employee:
        raise NotImplementedError

    def delete_by_id(self, employee_id: str) -> bool:
        raise NotImplementedError
