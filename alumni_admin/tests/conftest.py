"""Shared fixtures: an in-memory database and a client bound to it."""

import pytest
from sqlalchemy import inspect
from fastapi.testclient import TestClient

from alumni_admin.api.app import create_application
from alumni_admin.db import Database, DatabaseConfig


@pytest.fixture
def database():
    db = Database(DatabaseConfig(sqlite_path=':memory:', production=False))
    db.init_db()
    yield db
    db.close()


@pytest.fixture
def client(database):
    app = create_application(database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def add(database):
    """Insert a model instance and return its primary key."""
    def _add(instance):
        with database.session() as session:
            session.add(instance)
            session.flush()
            return inspect(instance).identity[0]
    return _add
