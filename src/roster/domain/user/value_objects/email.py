"""Email value object.

Provides validated, normalized email addresses for user identification.
"""

import re
from dataclasses import dataclass

from roster.domain.user.exceptions import InvalidEmailError

# Validates: local@domain.tld (no whitespace, exactly one @ before the dot part)
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# RFC 5321 path limit
MAX_EMAIL_LENGTH = 254


@dataclass(frozen=True)
class Email:
    """Value object representing a validated email address."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            msg = "Email cannot be empty"
            raise InvalidEmailError(msg, constraint="empty")

        normalized = self.value.strip().lower()

        if not EMAIL_PATTERN.fullmatch(normalized):
            msg = f"Invalid email format: {self.value}"
            raise InvalidEmailError(msg)

        if len(normalized) > MAX_EMAIL_LENGTH:
            msg = "Email address is too long"
            raise InvalidEmailError(msg, constraint="length")

        # Replace value with normalized version (frozen dataclass workaround)
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"Email('{self.value}')"
