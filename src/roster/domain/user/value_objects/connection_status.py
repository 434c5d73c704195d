from __future__ import annotations

from enum import Enum

from roster.domain.user.exceptions import InvalidConnectionStatusError


class ConnectionStatus(str, Enum):
    """Presence of a user: reachable right now or not."""

    CONNECTED = "connected"
    DISCONNECTED = "disconnected"

    @classmethod
    def create(cls, value: str | bool | ConnectionStatus) -> ConnectionStatus:
        """Parse a status name or the legacy boolean flag."""
        if isinstance(value, ConnectionStatus):
            return value
        if isinstance(value, bool):
            return cls.CONNECTED if value else cls.DISCONNECTED
        normalized = value.lower() if isinstance(value, str) else value
        try:
            return cls(normalized)
        except ValueError as e:
            raise InvalidConnectionStatusError(str(value)) from e

    @property
    def is_connected(self) -> bool:
        return self is ConnectionStatus.CONNECTED

    def __str__(self) -> str:
        return self.value
