from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.employee_directory.employee_directory.container import build_container
from src.employee_directory.employee_directory.main import create_app
from src.employee_directory.employee_directory.settings import DirectoryConfig
from src.employee_directory.employee_directory.storage.bootstrap import ensure_admin_user

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"


class Clock:
    """Settable clock shared by the token service and the exporter."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 8, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock(fixed_now) -> Clock:
    return Clock(fixed_now)


@pytest.fixture
def config(tmp_path) -> DirectoryConfig:
    return DirectoryConfig(
        secret_key="test-secret",
        data_path=tmp_path / "data.json",
        password_hash_method="pbkdf2:sha256:1000",
        log_level="WARNING",
    )


@pytest.fixture
def container(config, clock):
    c = build_container(config=config, clock=clock)
    c.store.initialize()
    return c


@pytest.fixture
def app(config, clock):
    app = create_app(config, clock=clock)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


def _auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(app, client) -> dict:
    c = app.extensions["employee_directory"]
    ensure_admin_user(c.users_repo, c.hasher, username=ADMIN_USERNAME, password=ADMIN_PASSWORD)
    resp = client.post("/api/auth/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert resp.status_code == 200
    return _auth_header(resp.get_json()["token"])


@pytest.fixture
def user_headers(client) -> dict:
    resp = client.post("/api/auth/register", json={"username": "reader", "password": "reader1"})
    assert resp.status_code == 200
    return _auth_header(resp.get_json()["token"])
