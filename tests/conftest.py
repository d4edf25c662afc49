"""Shared fixtures for the AI Tools API test-suite.

Every test gets its own application from ``create_app`` so the
favorites list always starts empty.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from ai_tools_api.app.core.config import Settings
from ai_tools_api.app.core.storage import Catalog, FavoritesStore
from ai_tools_api.app.main import create_app


@pytest.fixture
def app() -> FastAPI:
    return create_app(Settings(port=3000, cors_allow_origins="*"))


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def catalog() -> Catalog:
    return Catalog.from_seed()


@pytest.fixture
def store() -> FavoritesStore:
    return FavoritesStore()
