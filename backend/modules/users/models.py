"""
User module data models.
"""

import re
from typing import Any

from pydantic import BaseModel, Field, field_validator

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

NAME_REQUIRED = "Name is required and must be a non-empty string"
EMAIL_REQUIRED = "A valid email address is required"


def is_valid_email(email: str) -> bool:
    """True if the value looks like local@domain.tld."""
    return EMAIL_PATTERN.match(email) is not None


class User(BaseModel):
    """A registered person as stored in the users table."""

    id: int = Field(..., description="Database-assigned identifier")
    name: str = Field(..., description="Display name, trimmed")
    email: str = Field(..., description="Email address, trimmed")


class CreateUserRequest(BaseModel):
    """
    Request body for creating a user.

    Both fields are trimmed. Missing, non-string or blank values fail with
    a message naming the field; name is validated before email. Extra
    fields are ignored.
    """

    name: str = Field(None, validate_default=True, description="Display name")
    email: str = Field(None, validate_default=True, description="Email address")

    @field_validator("name", mode="before")
    @classmethod
    def name_must_be_non_empty(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError(NAME_REQUIRED)
        return value.strip()

    @field_validator("email", mode="before")
    @classmethod
    def email_must_look_valid(cls, value: Any) -> str:
        if not isinstance(value, str) or not is_valid_email(value.strip()):
            raise ValueError(EMAIL_REQUIRED)
        return value.strip()
