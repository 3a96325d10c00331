"""
Base exception classes for the Users API.

Every error raised by a component carries an ErrorKind. Components never
decide HTTP status codes; the API layer maps each kind to a status when it
renders the error (see api/errors.py).
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Error taxonomy shared by all components."""

    UNAUTHENTICATED = "UNAUTHENTICATED"
    INVALID_TOKEN = "INVALID_TOKEN"
    SERVER_MISCONFIGURED = "SERVER_MISCONFIGURED"
    INVALID_INPUT = "INVALID_INPUT"
    STORAGE_ERROR = "STORAGE_ERROR"


class UsersApiError(Exception):
    """
    Base exception for all Users API errors.

    Subclasses set `kind`; the message is what callers see in the
    `{"error": message}` response body.
    """

    kind: ErrorKind = ErrorKind.STORAGE_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to the API error body."""
        return {"error": self.message}


class UnauthenticatedError(UsersApiError):
    """No bearer token was supplied."""

    kind = ErrorKind.UNAUTHENTICATED

    def __init__(self, message: str = "Access denied. No token provided."):
        super().__init__(message)


class InvalidTokenError(UsersApiError):
    """Token signature, expiry or structure failed verification."""

    kind = ErrorKind.INVALID_TOKEN

    def __init__(self, message: str = "Invalid or expired token."):
        super().__init__(message)


class ServerMisconfiguredError(UsersApiError):
    """A required server-side setting (e.g. the signing secret) is missing."""

    kind = ErrorKind.SERVER_MISCONFIGURED

    def __init__(self, message: str = "Server configuration error."):
        super().__init__(message)


class InvalidInputError(UsersApiError):
    """Request body failed validation."""

    kind = ErrorKind.INVALID_INPUT


class StorageError(UsersApiError):
    """Database query or connectivity failure."""

    kind = ErrorKind.STORAGE_ERROR
