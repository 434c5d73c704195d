"""Pydantic request/response schemas."""

from roster.presentation.api.schemas.common import (
    ErrorResponse,
    HealthResponse,
    MessageResponse,
)
from roster.presentation.api.schemas.users import (
    CreateUserRequest,
    UpdateUserRequest,
    UserEnvelope,
    UserListEnvelope,
    UserResponse,
)

__all__ = [
    "CreateUserRequest",
    "ErrorResponse",
    "HealthResponse",
    "MessageResponse",
    "UpdateUserRequest",
    "UserEnvelope",
    "UserListEnvelope",
    "UserResponse",
]
