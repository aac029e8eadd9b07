from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import require_non_empty
from .model import Company
from .repository import CompanyRepository

LOGGER = logging.getLogger(__name__)


class CompanyService:
    def __init__(self, companies: CompanyRepository):
        self._companies = companies

    def list_all(self) -> Sequence[Company]:
        return self._companies.list_all()

    def create(self, name: str) -> Company:
        name = require_non_empty(name, "name")
        company = self._companies.create(name=name)
        LOGGER.info("Created company %s (%s)", company.name, company.company_id)
        return company

    def delete(self, company_id: str) -> None:
        removed = self._companies.delete_cascade(company_id)
        if removed < 0:
            LOGGER.info("Delete company %s: not found, nothing to do", company_id)
            return
        LOGGER.info("Deleted company %s and %d employee(s)", company_id, removed)
