"""
User repository for database access.

Encapsulates the SQL for the users table. Every statement is
parameterized; values are never interpolated into SQL text.
"""

import logging
from typing import Any, Sequence

import psycopg2

from shared.exceptions import StorageError
from shared.repository import BaseRepository

from .interfaces import IUserRepository
from .models import User

logger = logging.getLogger(__name__)

LIST_USERS_SQL = "SELECT id, name, email FROM users"
CREATE_USER_SQL = "INSERT INTO users (name, email) VALUES (%s, %s) RETURNING id, name, email"


class UserRepository(BaseRepository[User], IUserRepository):
    """
    Repository for user data access.

    Each method borrows one pooled connection for the duration of a single
    statement. Driver errors are logged and re-raised as StorageError.
    """

    def list_users(self) -> list[User]:
        try:
            with self._db.connection() as conn, conn.cursor() as cur:
                cur.execute(LIST_USERS_SQL)
                rows = cur.fetchall()
        except psycopg2.Error as e:
            logger.exception("Error fetching users")
            raise StorageError("An error occurred while fetching users") from e

        return [self._map_to_user(row) for row in rows]

    def create_user(self, name: str, email: str) -> User:
        try:
            with self._db.connection() as conn, conn.cursor() as cur:
                cur.execute(CREATE_USER_SQL, (name, email))
                row = cur.fetchone()
        except psycopg2.Error as e:
            logger.exception("Error creating user")
            raise StorageError("An error occurred while creating the user") from e

        if row is None:
            raise StorageError("An error occurred while creating the user")
        return self._map_to_user(row)

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    def _map_to_user(self, row: Sequence[Any]) -> User:
        """Map an (id, name, email) row to a User."""
        user_id, name, email = row
        return User(id=user_id, name=name, email=email)
