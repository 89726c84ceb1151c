from __future__ import annotations

from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


CLARK_ID = "0bf8651a-0923-47b8-aed3-e9fc1505e497"
ABSENT_ID = "0bf8651a-0923-47b8-aed3-e9fc1505e496"
CLARK = {"name": "Clark", "lastname": "Kent"}
BRUCE = {"name": "Bruce", "lastname": "Wayne"}


@pytest.fixture
def empty_store():
    from persistence import InMemoryDocumentStore

    return InMemoryDocumentStore()


@pytest.fixture
def seeded_store():
    from persistence import InMemoryDocumentStore

    return InMemoryDocumentStore({CLARK_ID: CLARK})


@pytest.fixture
def make_client():
    """
    Build a TestClient around a fresh app with an injected store/codec.
    """
    from fastapi.testclient import TestClient

    import app as app_module

    def _make(store, codec=None, settings=None, raise_server_exceptions=True) -> TestClient:
        return TestClient(
            app_module.create_app(store=store, codec=codec, settings=settings),
            raise_server_exceptions=raise_server_exceptions,
        )

    return _make


@pytest.fixture
def client(make_client, empty_store):
    return make_client(empty_store)


@pytest.fixture
def seeded_client(make_client, seeded_store):
    return make_client(seeded_store)
