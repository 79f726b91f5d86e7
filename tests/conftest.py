from __future__ import annotations

from datetime import datetime

import pytest

from gate_attendance.container import build_container
from gate_attendance.main import create_app
from gate_attendance.storage.memory_storage import MemoryStorage


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 8, 30, 0)


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def container(storage):
    return build_container(storage=storage, total_spaces=2)


@pytest.fixture
def app(monkeypatch, storage):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app({"STORAGE": storage, "TESTING": True})


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    def _login(username: str, password: str):
        return client.post("/", data={"username": username, "password": password})

    return _login
