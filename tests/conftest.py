"""Shared fixtures: one store of each variant and an HTTP client for each."""

from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from users_api.app.core.config import Settings
from users_api.app.main import create_app
from users_api.app.services.user_store import InMemoryUserStore, SQLiteUserStore, UserStore


@pytest.fixture
def memory_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def sqlite_store(tmp_path) -> SQLiteUserStore:
    store = SQLiteUserStore(str(tmp_path / "users.db"))
    store.startup()
    return store


@pytest.fixture(params=["memory", "sqlite"])
def store(request) -> UserStore:
    """Each store variant in turn, for contract tests."""
    return request.getfixturevalue(f"{request.param}_store")


@pytest.fixture
def memory_client() -> Iterator[TestClient]:
    app = create_app(Settings(user_store="memory"))
    with TestClient(app) as client:
        yield client


@pytest.fixture
def sqlite_client(tmp_path) -> Iterator[TestClient]:
    app = create_app(Settings(user_store="sqlite", database_url=str(tmp_path / "api.db")))
    with TestClient(app) as client:
        yield client


@pytest.fixture(params=["memory", "sqlite"])
def client(request) -> TestClient:
    return request.getfixturevalue(f"{request.param}_client")
