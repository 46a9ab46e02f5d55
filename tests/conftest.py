"""Shared fixtures: a fresh in-memory store per test."""

import pytest
from fastapi.testclient import TestClient

from photoflow.crud import Storage
from photoflow.main import app, get_storage


@pytest.fixture()
def storage():
    return Storage("sqlite://")


@pytest.fixture()
def client(storage):
    app.dependency_overrides[get_storage] = lambda: storage
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def make_project(storage):
    def _make(**fields):
        values = {"name": "Smith Wedding", "type": "Blank", "status": "Planning", "budget": 0}
        values.update(fields)
        return storage.create_project(values)
    return _make
