"""
Shared fixtures.

Every test gets its own seeded ``InMemoryStore``; the FastAPI app is wired
to it through ``dependency_overrides`` so tests never share state.
"""
import pytest
from fastapi.testclient import TestClient

from app.database import InMemoryStore, get_store, seed_store
from app.main import app


@pytest.fixture
def store() -> InMemoryStore:
    store = seed_store(InMemoryStore())
    store.initialized = True
    return store


@pytest.fixture
def empty_store() -> InMemoryStore:
    store = InMemoryStore()
    store.initialized = True
    return store


@pytest.fixture
def client(store: InMemoryStore):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
