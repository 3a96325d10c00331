"""
PostgreSQL connection pool.

The pool is an explicit resource: it is built once at startup, stored on
the application, and handed to repositories. Nothing in the codebase looks
it up through a module-level global.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

import psycopg2
from psycopg2.extensions import connection as PGConnection
from psycopg2.pool import ThreadedConnectionPool

from .config import Settings
from .exceptions import StorageError

logger = logging.getLogger(__name__)


class Database:
    """
    Thread-safe pool of PostgreSQL connections.

    Request handlers run in a threadpool, so each query borrows a
    connection for its own duration and returns it immediately.
    """

    def __init__(self, pool: ThreadedConnectionPool) -> None:
        self._pool = pool
        self._closed = False

    @classmethod
    def connect(cls, settings: Settings) -> "Database":
        """
        Build the pool from settings and verify connectivity.

        Raises:
            StorageError: If the pool cannot be created or SELECT 1 fails.
        """
        try:
            pool = ThreadedConnectionPool(
                settings.db_pool_min,
                settings.db_pool_max,
                **settings.database_kwargs(),
            )
        except psycopg2.Error as e:
            raise StorageError(f"Failed to connect to database: {e}") from e

        database = cls(pool)
        try:
            database.ping()
        except StorageError:
            database.close()
            raise
        return database

    @property
    def closed(self) -> bool:
        return self._closed

    @contextmanager
    def connection(self) -> Iterator[PGConnection]:
        """
        Borrow a connection for one unit of work.

        Commits when the block exits cleanly, rolls back otherwise, and
        always returns the connection to the pool. Broken connections are
        discarded instead of being reused.
        """
        conn = self._pool.getconn()
        try:
            yield conn
            conn.commit()
        except Exception:
            if not conn.closed:
                conn.rollback()
            raise
        finally:
            self._pool.putconn(conn, close=bool(conn.closed))

    def ping(self) -> None:
        """Round-trip a trivial query to prove the database is reachable."""
        try:
            with self.connection() as conn:
                with conn.cursor() as cur:
                    cur.execute("SELECT 1")
                    cur.fetchone()
        except psycopg2.Error as e:
            raise StorageError(f"Failed to connect to database: {e}") from e

    def close(self) -> None:
        """Close every pooled connection. Safe to call more than once."""
        if self._closed:
            return
        self._pool.closeall()
        self._closed = True
        logger.info("Database pool closed")
