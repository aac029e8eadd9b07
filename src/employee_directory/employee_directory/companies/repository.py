from __future__ import annotations

from typing import Protocol, Sequence

from .model import Company


class CompanyRepository(Protocol):
    def list_all(self) -> Sequence[Company]:
        raise NotImplementedError

    def create(self, *, name: str) -> Company:
        """Insert a company; raises DuplicateNameError on a case-insensitive name clash."""
        raise NotImplementedError

    def delete_cascade(self, company_id: str) -> int:
        """Delete the company and its employees.

        Returns the number of employees removed, or -1 if the company did not exist.
        """
        raise NotImplementedError
