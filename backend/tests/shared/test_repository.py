"""Tests for shared/repository.py."""

from typing import Optional
from unittest.mock import MagicMock

from shared.database import Database
from shared.repository import BaseRepository


class TestBaseRepository:
    """Tests for BaseRepository base class."""

    def test_init_stores_database(self):
        """Should store the pool in the _db attribute."""
        database = Database(MagicMock())
        repo = BaseRepository(database)
        assert repo._db is database

    def test_subclass_queries_through_pool(self):
        """Subclasses borrow connections from the injected pool."""
        pool = MagicMock()
        conn = MagicMock()
        conn.closed = False
        cursor = MagicMock()
        cursor.fetchone.return_value = ("hello",)
        conn.cursor.return_value.__enter__.return_value = cursor
        pool.getconn.return_value = conn

        class GreetingRepository(BaseRepository[str]):
            def first(self) -> Optional[str]:
                with self._db.connection() as c, c.cursor() as cur:
                    cur.execute("SELECT greeting FROM greetings LIMIT %s", (1,))
                    row = cur.fetchone()
                return row[0] if row else None

        repo = GreetingRepository(Database(pool))
        assert repo.first() == "hello"
        pool.putconn.assert_called_once_with(conn, close=False)
