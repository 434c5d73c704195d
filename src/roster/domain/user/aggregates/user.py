"""User aggregate root."""

from __future__ import annotations

from datetime import datetime
from typing import Optional, Union

from roster.domain.shared.identity import EntityIdentity, new_identity, touch
from roster.domain.shared.value_objects import EntityId
from roster.domain.user.value_objects import (
    ConnectionStatus,
    Email,
    Password,
    UserRole,
    Username,
)


class User:
    """
    User aggregate root.

    Owns one of each value object (email, username, password hash, role,
    connection status) under a single identity. The identity never changes
    after construction; every mutator refreshes ``updated_at``.

    Use ``User.create`` for new users and ``User.reconstitute`` when
    rehydrating from storage.
    """

    def __init__(  # NOQA: PLR0913
        self,
        identity: EntityIdentity,
        email: Email,
        username: Username,
        password: Password,
        role: UserRole,
        connection_status: ConnectionStatus,
    ):
        self._identity = identity
        self._email = email
        self._username = username
        self._password = password
        self._role = role
        self._connection_status = connection_status

    @property
    def id(self) -> EntityId:
        return self._identity.id

    @property
    def email(self) -> Email:
        return self._email

    @property
    def username(self) -> Username:
        return self._username

    @property
    def password(self) -> Password:
        return self._password

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def connection_status(self) -> ConnectionStatus:
        return self._connection_status

    @property
    def is_connected(self) -> bool:
        return self._connection_status.is_connected

    @property
    def is_admin(self) -> bool:
        return self._role.is_admin

    @property
    def created_at(self) -> datetime:
        return self._identity.created_at

    @property
    def updated_at(self) -> datetime:
        return self._identity.updated_at

    def connect(self) -> None:
        self._connection_status = ConnectionStatus.CONNECTED
        self._touch()

    def disconnect(self) -> None:
        self._connection_status = ConnectionStatus.DISCONNECTED
        self._touch()

    def change_email(self, email: Union[str, Email]) -> None:
        self._email = _as_email(email)
        self._touch()

    def change_username(self, username: Union[str, Username]) -> None:
        self._username = _as_username(username)
        self._touch()

    def change_password(self, password: Union[str, Password]) -> None:
        self._password = _as_password(password)
        self._touch()

    def change_role(self, role: Union[str, UserRole]) -> None:
        self._role = UserRole.create(role)
        self._touch()

    def _touch(self) -> None:
        self._identity = touch(self._identity)

    @classmethod
    def create(
        cls,
        email: Union[str, Email],
        password: Union[str, Password],
        username: Optional[Union[str, Username]] = None,
        role: Optional[Union[str, UserRole]] = None,
    ) -> User:
        """Create a new user with a fresh identity.

        Parameters
        ----------
        email
            Email address (validated and normalized)
        password
            Password *hash*; plaintext must be hashed by the caller
        username
            Optional username; a ``guest_<id>`` placeholder is derived
            from the new identity when omitted
        role
            Optional role, defaults to ``UserRole.USER``

        Raises
        ------
        ValidationError
            If any value fails validation. No aggregate is built in that case.
        """
        email_obj = _as_email(email)
        password_obj = _as_password(password)
        role_obj = UserRole.create(role) if role is not None else UserRole.USER
        identity = new_identity()
        username_obj = (
            _as_username(username)
            if username is not None
            else _placeholder_username(identity.id)
        )
        return cls(
            identity=identity,
            email=email_obj,
            username=username_obj,
            password=password_obj,
            role=role_obj,
            connection_status=ConnectionStatus.DISCONNECTED,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: Union[str, EntityId],
        email: Union[str, Email],
        username: Union[str, Username],
        password: Union[str, Password],
        role: Union[str, UserRole],
        created_at: datetime,
        updated_at: datetime,
        connection_status: Union[str, ConnectionStatus] = ConnectionStatus.DISCONNECTED,
    ) -> User:
        """Rebuild a user from persisted values, without any defaulting."""
        identity = EntityIdentity(
            id=id if isinstance(id, EntityId) else EntityId(id),
            created_at=created_at,
            updated_at=updated_at,
        )
        return cls(
            identity=identity,
            email=_as_email(email),
            username=_as_username(username),
            password=_as_password(password),
            role=UserRole.create(role),
            connection_status=ConnectionStatus.create(connection_status),
        )

    def has_same_state(self, other: User) -> bool:
        """Field-by-field comparison, unlike ``==`` which compares identity."""
        return (
            self._identity == other._identity
            and self._email == other._email
            and self._username == other._username
            and self._password == other._password
            and self._role == other._role
            and self._connection_status == other._connection_status
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return (
            f"User(id={self.id.value}, email={self._email.value}, "
            f"username={self._username.value}, role={self._role.value})"
        )


def _as_email(value: Union[str, Email]) -> Email:
    return value if isinstance(value, Email) else Email(value)


def _as_username(value: Union[str, Username]) -> Username:
    return value if isinstance(value, Username) else Username(value)


def _as_password(value: Union[str, Password]) -> Password:
    return value if isinstance(value, Password) else Password(value)


def _placeholder_username(entity_id: EntityId) -> Username:
    return Username(f"guest_{entity_id.hex[:12]}")
