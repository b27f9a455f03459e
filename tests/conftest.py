"""Shared fixtures: a mocked Database and an app/test client built around it."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from db.connection import Database, QueryResult
from main import create_app


@pytest.fixture
def mock_db():
    """A Database whose execute() reports one affected row by default."""
    db = MagicMock(spec=Database)
    db.execute.return_value = QueryResult(rowcount=1, rows=[])
    return db


@pytest.fixture
def app(mock_db):
    return create_app(mock_db)


@pytest.fixture(name="client")
def client_fixture(app):
    """Create a test client."""
    return TestClient(app)
