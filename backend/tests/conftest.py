"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from reencuentro.core.config import Settings
from reencuentro.core.store import InMemoryStore
from reencuentro.main import create_app
from reencuentro.services.layout_service import LayoutService
from reencuentro.services.session_service import SessionService


@pytest.fixture
def settings():
    """Default settings, isolated from any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def layout(settings):
    return LayoutService(settings)


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def booking(store, settings):
    """A fresh booking session over an empty store."""
    return SessionService(store=store, settings=settings)


@pytest.fixture
def valid_fields():
    return {
        "nombres": "Ana",
        "apellidos": "Lima",
        "dni": "87654321",
        "celular": "912345678",
        "email": "ana@x.com",
    }


@pytest.fixture
def client(settings, store):
    """Test client over a fresh app sharing the ``store`` fixture."""
    with TestClient(create_app(settings=settings, store=store)) as c:
        yield c
