from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from user_management_api.app.core.config import Settings
from user_management_api.app.core.store import InMemoryUserStore
from user_management_api.app.main import create_app
from user_management_api.app.services.user_service import UserService


@pytest.fixture
def store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def service(store: InMemoryUserStore) -> UserService:
    return UserService(store)


@pytest.fixture
def app(store: InMemoryUserStore) -> FastAPI:
    """A fresh application per test, backed by the ``store`` fixture."""
    return create_app(Settings(api_prefix=""), store=store)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)
