"""Request and response schemas for the users endpoints.

Request fields are plain strings on purpose: format rules live in the domain
value objects, and their errors come back through the domain exception
handlers with stable codes.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from roster.domain.user import User


class CreateUserRequest(BaseModel):
    """Request schema for creating a new user."""

    email: str = Field(..., min_length=1, description="Email address")
    password: str = Field(..., min_length=1, description="Plaintext password")
    username: Optional[str] = Field(None, description="Defaults to a guest_ handle")
    role: Optional[str] = Field(None, description="admin, moderator, user or guest")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "ada@example.com",
                "password": "correct-horse-battery",
                "username": "ada_l",
                "role": "user",
            },
        },
    )


class UpdateUserRequest(BaseModel):
    """Request schema for a partial user update. At least one field is required."""

    email: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


class UserResponse(BaseModel):
    """Public view of a user. Never includes the password hash."""

    id: str
    email: str
    username: str
    role: str
    connection_status: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> UserResponse:
        return cls(
            id=user.id.value,
            email=user.email.value,
            username=user.username.value,
            role=user.role.value,
            connection_status=user.connection_status.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UserEnvelope(BaseModel):
    """Single-user response body."""

    success: bool = True
    message: Optional[str] = None
    data: UserResponse


class UserListEnvelope(BaseModel):
    """User list response body."""

    success: bool = True
    data: list[UserResponse]
    count: int
