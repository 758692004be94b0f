from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from recipe_finder.app import create_app
from recipe_finder.storage.store import MemStore


@pytest.fixture
def store() -> MemStore:
    return MemStore.seeded()


@pytest.fixture
def client(store: MemStore) -> TestClient:
    """A client over a freshly seeded store, so mutations never leak across tests."""
    return TestClient(create_app(store))
