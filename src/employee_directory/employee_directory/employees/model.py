from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class EmployeeData:
    """Editable employee fields (everything except the id)."""

    full_name: str
    position: str
    company_id: str
    department_id: Optional[str]
    phone: str
    email: str


@dataclass(frozen=True)
class Employee:
    employee_id: str
    full_name: str
    position: str
    company_id: str
    department_id: Optional[str]
    phone: str
    email: str

    @classmethod
    def from_data(cls, employee_id: str, data: EmployeeData) -> "Employee":
        return cls(
            employee_id=employee_id,
            full_name=data.full_name,
            position=data.position,
            company_id=data.company_id,
            department_id=data.department_id,
            phone=data.phone,
            email=data.email,
        )

    @classmethod
    def from_record(cls, row: Dict[str, Any]) -> "Employee":
        return cls(
            employee_id=str(row["id"]),
            full_name=str(row.get("fullName") or ""),
            position=str(row.get("position") or ""),
            company_id=str(row.get("companyId") or ""),
            department_id=row.get("departmentId") or None,
            phone=str(row.get("phone") or ""),
            email=str(row.get("email") or ""),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.employee_id,
            "fullName": self.full_name,
            "position": self.position,
            "departmentId": self.department_id,
            "companyId": self.company_id,
            "phone": self.phone,
            "email": self.email,
        }

    def to_dict(self) -> Dict[str, Any]:
        return self.to_record()


@dataclass(frozen=True)
class EnrichedEmployee:
    """Employee plus company/department names resolved at read time."""

    employee: Employee
    company_name: str
    department_name: str

    def to_dict(self) -> Dict[str, Any]:
        out = self.employee.to_dict()
        out["companyName"] = self.company_name
        out["departmentName"] = self.department_name
        return out
