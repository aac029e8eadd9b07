from __future__ import annotations

from datetime import timedelta

import pytest

from src.employee_directory.employee_directory.auth.gate import extract_bearer_token
from src.employee_directory.employee_directory.core.exceptions import InvalidTokenError, MissingTokenError


def test_extract_bearer_token():
    assert extract_bearer_token("Bearer abc.def.ghi") == "abc.def.ghi"
    assert extract_bearer_token("bearer  xyz ") == "xyz"
    with pytest.raises(MissingTokenError):
        extract_bearer_token(None)
    with pytest.raises(MissingTokenError):
        extract_bearer_token("Bearer")
    with pytest.raises(InvalidTokenError):
        extract_bearer_token("Basic dXNlcjpwYXNz")


def test_missing_token_is_401(client):
    resp = client.get("/api/companies")
    assert resp.status_code == 401
    assert resp.get_json()["error"] == "MissingToken"


def test_garbled_token_is_403(client):
    resp = client.get("/api/companies", headers={"Authorization": "Bearer garbage"})
    assert resp.status_code == 403
    assert resp.get_json()["error"] == "InvalidToken"


def test_expired_token_is_403(client, user_headers, clock, fixed_now):
    clock.now = fixed_now + timedelta(hours=24, minutes=1)
    resp = client.get("/api/companies", headers=user_headers)
    assert resp.status_code == 403
    assert resp.get_json()["error"] == "ExpiredToken"


def test_reads_allowed_for_any_role(client, user_headers):
    assert client.get("/api/companies", headers=user_headers).status_code == 200
    assert client.get("/api/departments", headers=user_headers).status_code == 200
    assert client.get("/api/employees", headers=user_headers).status_code == 200
    assert client.get("/api/employees/export", headers=user_headers).status_code == 200


@pytest.mark.parametrize(
    "method, path",
    [
        ("post", "/api/companies"),
        ("delete", "/api/companies/c1"),
        ("post", "/api/departments"),
        ("delete", "/api/departments/d1"),
        ("post", "/api/employees"),
        ("put", "/api/employees/e1"),
        ("delete", "/api/employees/e1"),
    ],
)
def test_mutations_require_admin(client, user_headers, method, path):
    resp = getattr(client, method)(path, json={"name": "X"}, headers=user_headers)
    assert resp.status_code == 403
    assert resp.get_json()["error"] == "AdminRequired"


def test_token_outlives_deleted_user(app, client, admin_headers):
    # Tokens are not re-checked against the user store.
    store = app.extensions["employee_directory"].store
    with store.transaction() as snapshot:
        snapshot.users.clear()
    resp = client.post("/api/companies", json={"name": "Acme"}, headers=admin_headers)
    assert resp.status_code == 201
