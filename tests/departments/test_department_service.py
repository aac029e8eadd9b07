from __future__ import annotations

import pytest

from src.employee_directory.employee_directory.core.exceptions import DuplicateNameError


def test_duplicate_department_name_case_insensitive(container):
    container.department_service.create("Sales")
    with pytest.raises(DuplicateNameError):
        container.department_service.create("SALES")


def test_delete_department_orphans_employees(container):
    acme = container.company_service.create("Acme")
    sales = container.department_service.create("Sales")
    support = container.department_service.create("Support")
    base = {"position": "Manager", "companyId": acme.company_id, "phone": "+1234567890", "email": "a@acme.test"}
    in_sales = container.employee_service.create({**base, "fullName": "Ivan Petrov", "departmentId": sales.dept_id})
    in_support = container.employee_service.create(
        {**base, "fullName": "Anna Ivanova", "departmentId": support.dept_id}
    )

    container.department_service.delete(sales.dept_id)

    remaining = {e.employee_id: e for e in container.employees_repo.list_all()}
    assert set(remaining) == {in_sales.employee_id, in_support.employee_id}
    assert remaining[in_sales.employee_id].department_id is None
    assert remaining[in_support.employee_id].department_id == support.dept_id
    assert [d.dept_name for d in container.department_service.list_all()] == ["Support"]

    raw = next(r for r in container.store.load().employees if r["id"] == in_sales.employee_id)
    assert raw["departmentId"] is None


def _fail_on_save(snapshot):
    raise AssertionError("no-op delete must not rewrite the store")


def test_delete_missing_department_is_noop(container, monkeypatch):
    container.department_service.create("Sales")
    before = container.store.path.read_bytes()
    monkeypatch.setattr(container.store, "save", _fail_on_save)
    container.department_service.delete("nope")
    assert len(container.department_service.list_all()) == 1
    assert container.store.path.read_bytes() == before
