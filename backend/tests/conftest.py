"""Shared fixtures: a fresh store and app per test."""

import pytest
from fastapi.testclient import TestClient

from f1api.main import create_app
from f1api.services.store import ResourceStore


@pytest.fixture
def make_store():
    """Build an initialized store, optionally from an inline seed."""
    def _make(seed: dict | None = None, **kwargs) -> ResourceStore:
        if seed is not None:
            kwargs["seed_loader"] = lambda: seed
        store = ResourceStore(**kwargs)
        store.initialize()
        return store
    return _make


@pytest.fixture
def store(make_store):
    return make_store()


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as c:
        yield c
