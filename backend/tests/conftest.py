"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Optional
import jwt  # PyJWT

from fastapi.testclient import TestClient

from api import create_app
from api.dependencies import get_user_repository
from modules.users.models import User
from shared.config import Settings
from shared.exceptions import StorageError


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
    algorithm: str = "HS256",
    extra: Optional[dict] = None,
) -> str:
    """
    Create a test JWT token for authentication.

    Args:
        user_id: Subject to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        secret: Signing secret
        algorithm: HMAC algorithm to sign with
        extra: Additional claims

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    payload.update(extra or {})
    return jwt.encode(payload, secret, algorithm=algorithm)


class InMemoryUserRepository:
    """User repository backed by a list, standing in for PostgreSQL."""

    def __init__(self) -> None:
        self.users: list[User] = []
        self.fail = False

    def list_users(self) -> list[User]:
        if self.fail:
            raise StorageError("An error occurred while fetching users")
        return list(self.users)

    def create_user(self, name: str, email: str) -> User:
        if self.fail:
            raise StorageError("An error occurred while creating the user")
        user = User(id=len(self.users) + 1, name=name, email=email)
        self.users.append(user)
        return user


def make_settings(**overrides) -> Settings:
    """Settings isolated from any .env file, with a test signing secret."""
    values = {"jwt_secret": TEST_JWT_SECRET}
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def app(settings, user_repository):
    """Application wired to the in-memory repository."""
    application = create_app(settings)
    application.dependency_overrides[get_user_repository] = lambda: user_repository
    return application


@pytest.fixture
def client(app) -> TestClient:
    """Test client that does not run the lifespan (no database needed)."""
    return TestClient(app)


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def auth_token(test_user_id: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
