"""Shared test fixtures for the task board tests."""

import pytest

from taskboard.config import BoardConfig
from taskboard.server import create_app
from taskboard.store import TaskStore, seed_tasks


@pytest.fixture()
def store() -> TaskStore:
    """Store holding the eight demo tasks (4 todo, 2 doing, 2 done)."""
    return TaskStore(seed_tasks())


@pytest.fixture()
def empty_store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def app(store):
    app = create_app(store, BoardConfig())
    app.config["TESTING"] = True
    return app


@pytest.fixture()
def client(app):
    return app.test_client()
