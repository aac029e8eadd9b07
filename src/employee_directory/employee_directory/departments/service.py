from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import require_non_empty
from .model import Department
from .repository import DepartmentRepository

LOGGER = logging.getLogger(__name__)


class DepartmentService:
    """Departments are global (not per company) and immutable once created."""

    def __init__(self, departments: DepartmentRepository):
        self._departments = departments

    def list_all(self) -> Sequence[Department]:
        return self._departments.list_all()

    def create(self, name: str) -> Department:
        name = require_non_empty(name, "name")
        department = self._departments.create(dept_name=name)
        LOGGER.info("Created department %s (%s)", department.dept_name, department.dept_id)
        return department

    def delete(self, dept_id: str) -> None:
        orphaned = self._departments.delete_orphaning(dept_id)
        if orphaned < 0:
            LOGGER.info("Delete department %s: not found, nothing to do", dept_id)
            return
        LOGGER.info("Deleted department %s, cleared it on %d employee(s)", dept_id, orphaned)
