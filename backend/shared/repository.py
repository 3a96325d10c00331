"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
access to the injected connection pool.
"""

from typing import TypeVar, Generic

from .database import Database


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Connection pool access via self._db
    - Generic type parameter for model type hints

    Subclasses implement domain-specific queries and handle row-to-model
    mapping internally. Queries must always be parameterized.

    Example:
        class UserRepository(BaseRepository[User]):
            def list_users(self) -> list[User]:
                with self._db.connection() as conn, conn.cursor() as cur:
                    cur.execute("SELECT id, name, email FROM users")
                    return [self._map_to_user(row) for row in cur.fetchall()]
    """

    def __init__(self, db: Database) -> None:
        """
        Initialize the repository with a connection pool.

        Args:
            db: Database pool shared by every request.
        """
        self._db = db
