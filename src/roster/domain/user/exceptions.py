"""User domain exceptions.

Custom exceptions for the user domain, used for validation
and business rule violations.
"""

from roster.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """
    Raised when email format is invalid.

    This exception is raised during Email value object creation
    when the provided string doesn't match expected email format.

    Attributes
    ----------
    message
        Error description
    details
        ``{"constraint": ...}`` naming the violated rule
    """

    def __init__(self, message: str, constraint: str = "format") -> None:
        super().__init__(message, ErrorCode.INVALID_EMAIL, {"constraint": constraint})


class InvalidUsernameError(ValidationError):
    """Raised when a username is empty, too short/long or has bad characters."""

    def __init__(self, message: str, constraint: str = "format") -> None:
        super().__init__(
            message,
            ErrorCode.INVALID_USERNAME,
            {"constraint": constraint},
        )


class InvalidPasswordError(ValidationError):
    """Raised when a password hash is empty."""

    def __init__(self, message: str = "Password hash cannot be empty") -> None:
        super().__init__(message, ErrorCode.INVALID_PASSWORD, {"constraint": "empty"})


class InvalidRoleError(ValidationError):
    """Raised when a role is not one of the known roles."""

    def __init__(self, role: str, valid_roles: list[str]) -> None:
        self.role = role
        super().__init__(
            f"Invalid role: {role}. Must be one of: {', '.join(valid_roles)}",
            ErrorCode.INVALID_ROLE,
            {"constraint": "enumeration", "value": role},
        )


class InvalidConnectionStatusError(ValidationError):
    """Raised when a connection status string is unknown."""

    def __init__(self, status: str) -> None:
        self.status = status
        super().__init__(
            f"Invalid connection status: {status}",
            ErrorCode.INVALID_CONNECTION_STATUS,
            {"constraint": "enumeration", "value": status},
        )


class WeakPasswordError(ValidationError):
    """Raised when a plaintext password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements") -> None:
        super().__init__(message, ErrorCode.WEAK_PASSWORD)


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            f"Email already registered: {email}",
            ErrorCode.EMAIL_ALREADY_EXISTS,
            {"email": email},
        )


class UsernameAlreadyExistsError(ConflictError):
    """Username already taken."""

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(
            f"Username already taken: {username}",
            ErrorCode.USERNAME_ALREADY_EXISTS,
            {"username": username},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id
        super().__init__(
            f"User not found: {user_id}",
            ErrorCode.USER_NOT_FOUND,
            {"user_id": user_id},
        )
