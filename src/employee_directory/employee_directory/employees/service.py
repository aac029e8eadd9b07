from __future__ import annotations

import logging
from typing import Any, Mapping

from ..common.validators import optional_text, require_fields
from ..core.exceptions import NotFoundError
from .model import Employee, EmployeeData
from .repository import EmployeeRepository

LOGGER = logging.getLogger(__name__)

REQUIRED_FIELDS = ("fullName", "position", "companyId", "phone", "email")


def parse_employee_fields(fields: Mapping[str, Any]) -> EmployeeData:
    """Validate a camelCase payload into EmployeeData.

    All required fields are checked at once so the error names every missing one.
    """
    cleaned = require_fields(fields, REQUIRED_FIELDS)
    return EmployeeData(
        full_name=cleaned["fullName"],
        position=cleaned["position"],
        company_id=cleaned["companyId"],
        department_id=optional_text(fields.get("departmentId")),
        phone=cleaned["phone"],
        email=cleaned["email"],
    )


class EmployeeService:
    """Use cases: create, replace and delete employee records (admin)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def create(self, fields: Mapping[str, Any]) -> Employee:
        data = parse_employee_fields(fields)
        employee = self._employees.create(data)
        LOGGER.info("Created employee %s in company %s", employee.employee_id, employee.company_id)
        return employee

    def update(self, employee_id: str, fields: Mapping[str, Any]) -> Employee:
        """Full replacement: fields missing from the payload are not carried over."""
        if not self._employees.get_by_id(employee_id):
            raise NotFoundError("Employee not found")
        data = parse_employee_fields(fields)
        employee = self._employees.replace(employee_id, data)
        LOGGER.info("Updated employee %s", employee_id)
        return employee

    def delete(self, employee_id: str) -> None:
        if self._employees.delete_by_id(employee_id):
            LOGGER.info("Deleted employee %s", employee_id)
