"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together the settings, the
connection pool and the module implementations. One container is built per
application by create_app() and stored on app.state; route dependencies
read it from the request rather than from a module-level global.
"""

from typing import TYPE_CHECKING, Optional

from fastapi import Request

from shared.config import Settings
from shared.database import Database
from shared.exceptions import StorageError

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import ICredentialVerifier
    from modules.users.interfaces import IUserRepository


class ServiceContainer:
    """
    Container for all service instances.

    The database may be supplied up front (the runner opens it before the
    listener binds) or opened later by the application lifespan. Services
    are created lazily on first access and cached.
    """

    def __init__(
        self,
        settings: Settings,
        database: Optional[Database] = None,
    ) -> None:
        self.settings = settings
        self._database = database
        self._verifier: "ICredentialVerifier | None" = None
        self._user_repository: "IUserRepository | None" = None

    @property
    def has_database(self) -> bool:
        return self._database is not None and not self._database.closed

    @property
    def database(self) -> Database:
        """Get the connection pool, failing if it was never opened."""
        if not self.has_database:
            raise StorageError("Database is not available")
        return self._database

    @property
    def verifier(self) -> "ICredentialVerifier":
        """Get the credential verifier instance."""
        if self._verifier is None:
            from modules.auth.service import CredentialVerifier
            self._verifier = CredentialVerifier(self.settings)
        return self._verifier

    @property
    def users(self) -> "IUserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            self._user_repository = UserRepository(self.database)
        return self._user_repository

    def open_database(self) -> Database:
        """
        Open the connection pool if it is not open yet.

        Raises:
            StorageError: If the database cannot be reached
        """
        if not self.has_database:
            self._database = Database.connect(self.settings)
            self._user_repository = None
        return self._database

    def close(self) -> None:
        """Release the connection pool."""
        if self._database is not None:
            self._database.close()


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_container(request: Request) -> ServiceContainer:
    """FastAPI dependency for the application's service container."""
    return request.app.state.container


def get_user_repository(request: Request) -> "IUserRepository":
    """FastAPI dependency for the user repository."""
    return get_container(request).users


def get_credential_verifier(request: Request) -> "ICredentialVerifier":
    """FastAPI dependency for the credential verifier."""
    return get_container(request).verifier
