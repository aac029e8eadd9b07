from __future__ import annotations

from typing import Protocol, Sequence

from .model import Department


class DepartmentRepository(Protocol):
    def list_all(self) -> Sequence[Department]:
        raise NotImplementedError

    def create(self, *, dept_name: str) -> Department:
        raise NotImplementedError

    def delete_orphaning(self, dept_id: str) -> int:
        """Delete the department and clear it on its employees.

        Returns the number of employees orphaned, or -1 if the department did not exist.
        """
        raise NotImplementedError
