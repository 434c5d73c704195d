"""EntityId value object.

Opaque identifier shared by all aggregates. Only version-4 UUIDs are
accepted; the stored value is normalized to lower-case.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from uuid import UUID, uuid4

from roster.domain.shared.exceptions import InvalidEntityIdError

UUID_V4_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class EntityId:
    """Value object representing a validated UUID v4 identifier."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidEntityIdError(str(self.value), reason="empty")

        if not UUID_V4_PATTERN.fullmatch(self.value):
            raise InvalidEntityIdError(self.value)

        object.__setattr__(self, "value", self.value.lower())

    @classmethod
    def generate(cls) -> EntityId:
        """Create a fresh identifier from a cryptographically random UUID."""
        return cls(str(uuid4()))

    @classmethod
    def from_uuid(cls, value: UUID) -> EntityId:
        return cls(str(value))

    @property
    def uuid(self) -> UUID:
        return UUID(self.value)

    @property
    def hex(self) -> str:
        return self.uuid.hex

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"EntityId('{self.value}')"
