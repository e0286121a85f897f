"""Shared fixtures for the CI/CD Demo API tests."""

import pytest
from fastapi.testclient import TestClient

from cicd_demo_api.app.core.config import Settings
from cicd_demo_api.app.core.store import InMemoryStore, seed_demo_data
from cicd_demo_api.app.main import create_app


@pytest.fixture
def settings():
    """Settings with fixed build metadata, independent of the environment."""
    return Settings(
        app_version="2.3.4",
        build_time="2026-01-01T00:00:00.000Z",
        git_commit="abc1234",
        environment="test",
        seed_demo_data=True,
    )


@pytest.fixture
def store():
    """A store holding the two demo users and two demo posts."""
    s = InMemoryStore()
    seed_demo_data(s)
    return s


@pytest.fixture
def empty_store():
    return InMemoryStore()


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    """Test client that returns 500 responses instead of re-raising."""
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
