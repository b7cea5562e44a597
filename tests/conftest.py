"""Pytest fixtures shared by the Library API tests.

Router tests run against the real application with the database session
replaced by an ``AsyncMock``; services are patched per test.
"""

import functools
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from src.api.property_mappings import build_property_mappings
from src.app import create_app
from src.database.session import get_db
from src.modules.author.mapping import current_age, get_age_calculator
from src.rate_limit import limiter
from tests.factories import TODAY


@pytest.fixture(autouse=True)
def _disable_rate_limits(monkeypatch):
    monkeypatch.setattr(limiter, "enabled", False)


@pytest.fixture
def registry():
    return build_property_mappings()


@pytest.fixture
def mock_session():
    session = AsyncMock()
    session.add = MagicMock()
    session.add_all = MagicMock()
    session.flush = AsyncMock()
    return session


@pytest.fixture
def app(mock_session):
    application = create_app()

    async def _override_get_db():
        yield mock_session

    application.dependency_overrides[get_db] = _override_get_db
    application.dependency_overrides[get_age_calculator] = lambda: functools.partial(current_age, today=TODAY)
    return application


@pytest.fixture
def client(app):
    return TestClient(app, raise_server_exceptions=False)
