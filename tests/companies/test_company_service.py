from __future__ import annotations

import pytest

from src.employee_directory.employee_directory.core.exceptions import DuplicateNameError, ValidationError


def _employee(company_id: str, name: str, **extra) -> dict:
    data = {
        "fullName": name,
        "position": "Engineer",
        "companyId": company_id,
        "phone": "+1000000000",
        "email": f"{name.lower().replace(' ', '.')}@example.test",
    }
    data.update(extra)
    return data


def test_create_company_assigns_id(container):
    company = container.company_service.create("  Acme  ")
    assert company.name == "Acme"
    assert company.company_id
    assert [c.to_dict() for c in container.company_service.list_all()] == [{"id": company.company_id, "name": "Acme"}]


def test_duplicate_company_name_case_insensitive(container):
    container.company_service.create("Acme")
    with pytest.raises(DuplicateNameError):
        container.company_service.create("acme")
    assert len(container.company_service.list_all()) == 1


def test_company_name_required(container):
    with pytest.raises(ValidationError) as exc:
        container.company_service.create("   ")
    assert exc.value.fields == {"name": "required"}


def test_delete_company_cascades_to_its_employees_only(container):
    acme = container.company_service.create("Acme")
    globex = container.company_service.create("Globex")
    container.employee_service.create(_employee(acme.company_id, "Ivan Petrov"))
    container.employee_service.create(_employee(acme.company_id, "Anna Ivanova"))
    kept = container.employee_service.create(_employee(globex.company_id, "Homer Simpson"))

    container.company_service.delete(acme.company_id)

    assert [c.name for c in container.company_service.list_all()] == ["Globex"]
    assert [e.employee_id for e in container.employees_repo.list_all()] == [kept.employee_id]


def _fail_on_save(snapshot):
    raise AssertionError("no-op delete must not rewrite the store")


def test_delete_missing_company_is_noop(container, monkeypatch):
    acme = container.company_service.create("Acme")
    before = container.store.path.read_bytes()
    monkeypatch.setattr(container.store, "save", _fail_on_save)
    container.company_service.delete("does-not-exist")
    assert [c.company_id for c in container.company_service.list_all()] == [acme.company_id]
    assert container.store.path.read_bytes() == before
