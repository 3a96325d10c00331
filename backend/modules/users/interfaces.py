"""
Users module interface.

Routes depend on IUserRepository so that tests (and any future storage
backend) can provide their own implementation.
"""

from typing import Protocol, runtime_checkable

from .models import User


@runtime_checkable
class IUserRepository(Protocol):
    """Contract for reading and creating users."""

    def list_users(self) -> list[User]:
        """
        Return every stored user.

        No ordering is guaranteed beyond what the store returns.

        Raises:
            StorageError: On any database or connectivity failure
        """
        ...

    def create_user(self, name: str, email: str) -> User:
        """
        Insert a user and return it with its assigned id.

        Raises:
            StorageError: On constraint violation or connectivity failure
        """
        ...
