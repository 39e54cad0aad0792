"""Shared fixtures for API tests: a fresh in-memory store per test."""

import pytest
from httpx import ASGITransport, AsyncClient

from app.infrastructure.dependencies import get_key_value_store
from app.infrastructure.storage.memory_key_value_store import InMemoryKeyValueStore
from app.main import app


@pytest.fixture
def store():
    """Route every request to one in-memory store for the duration of a test."""
    store = InMemoryKeyValueStore()

    async def _override():
        yield store

    app.dependency_overrides[get_key_value_store] = _override
    yield store
    app.dependency_overrides.clear()


@pytest.fixture
def client_factory(store):
    def _make() -> AsyncClient:
        return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")

    return _make
