"""
Users module.

Handles validation, storage and the HTTP endpoints for the users resource.

Public API:
- IUserRepository: Interface for user storage
- UserRepository: PostgreSQL implementation
- User: Stored user record
- CreateUserRequest: Validated request body for creating a user
"""

from .interfaces import IUserRepository
from .models import User, CreateUserRequest, is_valid_email
from .repository import UserRepository

__all__ = [
    # Interface
    "IUserRepository",
    # Implementation
    "UserRepository",
    # Models
    "User",
    "CreateUserRequest",
    "is_valid_email",
]
