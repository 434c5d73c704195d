from __future__ import annotations

from enum import Enum

from roster.domain.user.exceptions import InvalidRoleError


class UserRole(str, Enum):
    """User roles, ordered from most to least privileged."""

    ADMIN = "admin"
    MODERATOR = "moderator"
    USER = "user"
    GUEST = "guest"

    @classmethod
    def create(cls, value: str | UserRole) -> UserRole:
        """Parse a role name case-insensitively."""
        if isinstance(value, UserRole):
            return value
        normalized = value.lower() if isinstance(value, str) else value
        try:
            return cls(normalized)
        except ValueError as e:
            raise InvalidRoleError(str(value), [r.value for r in cls]) from e

    @property
    def is_admin(self) -> bool:
        return self is UserRole.ADMIN

    @property
    def is_moderator(self) -> bool:
        return self is UserRole.MODERATOR

    @property
    def is_user(self) -> bool:
        return self is UserRole.USER

    @property
    def is_guest(self) -> bool:
        return self is UserRole.GUEST

    def __str__(self) -> str:
        return self.value
