"""Password value object.

Holds an already-hashed password. Hashing plaintext is the job of
``PasswordHashingService``; this type only guarantees a non-empty value
and keeps it out of logs and reprs.
"""

from __future__ import annotations

from dataclasses import dataclass

from roster.domain.user.exceptions import InvalidPasswordError


@dataclass(frozen=True)
class Password:
    """Value object wrapping a password hash."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidPasswordError

    @classmethod
    def from_hash(cls, password_hash: str) -> Password:
        return cls(password_hash)

    def __str__(self) -> str:
        return "*****"

    def __repr__(self) -> str:
        return "Password(*****)"
