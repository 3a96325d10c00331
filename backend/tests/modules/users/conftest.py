"""Fixtures for the users module tests."""

import pytest
from unittest.mock import MagicMock

from shared.database import Database


@pytest.fixture
def connection():
    conn = MagicMock()
    conn.closed = False
    return conn


@pytest.fixture
def cursor(connection):
    cur = MagicMock()
    connection.cursor.return_value.__enter__.return_value = cur
    return cur


@pytest.fixture
def pool(connection):
    pool = MagicMock()
    pool.getconn.return_value = connection
    return pool


@pytest.fixture
def database(pool, cursor) -> Database:
    """A Database over a mock pool; `cursor` is what queries run on."""
    return Database(pool)
