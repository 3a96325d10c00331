"""
Shared infrastructure for the Users API backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: PostgreSQL connection pool
- exceptions: Error taxonomy
- repository: Base repository class

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import Database
from .exceptions import (
    ErrorKind,
    UsersApiError,
    UnauthenticatedError,
    InvalidTokenError,
    ServerMisconfiguredError,
    InvalidInputError,
    StorageError,
)

__all__ = [
    "Settings",
    "get_settings",
    "Database",
    "ErrorKind",
    "UsersApiError",
    "UnauthenticatedError",
    "InvalidTokenError",
    "ServerMisconfiguredError",
    "InvalidInputError",
    "StorageError",
]
