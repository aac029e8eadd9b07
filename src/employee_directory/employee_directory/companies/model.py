from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Company:
    company_id: str
    name: str

    def to_dict(self) -> dict:
        return {"id": self.company_id, "name": self.name}
