from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Department:
    dept_id: str
    dept_name: str

    def to_dict(self) -> dict:
        return {"id": self.dept_id, "name": self.dept_name}
