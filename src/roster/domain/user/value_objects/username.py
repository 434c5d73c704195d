import re
from dataclasses import dataclass

from roster.domain.user.exceptions import InvalidUsernameError

USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]+$")
MIN_USERNAME_LENGTH = 3
MAX_USERNAME_LENGTH = 30


@dataclass(frozen=True)
class Username:
    """Public handle of a user: letters, digits and underscores only."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            msg = "Username cannot be empty"
            raise InvalidUsernameError(msg, constraint="empty")

        if not MIN_USERNAME_LENGTH <= len(self.value) <= MAX_USERNAME_LENGTH:
            msg = (
                f"Username must be between {MIN_USERNAME_LENGTH} "
                f"and {MAX_USERNAME_LENGTH} characters"
            )
            raise InvalidUsernameError(msg, constraint="length")

        if not USERNAME_PATTERN.fullmatch(self.value):
            msg = "Username can only contain letters, numbers, and underscores"
            raise InvalidUsernameError(msg)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Username('{self.value}')"
