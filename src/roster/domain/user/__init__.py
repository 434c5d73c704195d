"""User domain manages user identity and presence.

This domain handles:
- User aggregate (id, email, username, password hash, role, status)
- Value objects validating each of those fields
- The repository port the aggregate is persisted through
"""

from roster.domain.user.aggregates import User
from roster.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidConnectionStatusError,
    InvalidEmailError,
    InvalidPasswordError,
    InvalidRoleError,
    InvalidUsernameError,
    UsernameAlreadyExistsError,
    UserNotFoundError,
    WeakPasswordError,
)
from roster.domain.user.repositories import UserRepository
from roster.domain.user.value_objects import (
    ConnectionStatus,
    Email,
    Password,
    UserRole,
    Username,
)

__all__ = [
    "ConnectionStatus",
    "Email",
    "EmailAlreadyExistsError",
    "InvalidConnectionStatusError",
    "InvalidEmailError",
    "InvalidPasswordError",
    "InvalidRoleError",
    "InvalidUsernameError",
    "Password",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
    "Username",
    "UsernameAlreadyExistsError",
    "WeakPasswordError",
]
