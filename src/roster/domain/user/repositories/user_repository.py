"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Union

from roster.domain.shared.value_objects import EntityId
from roster.domain.user.aggregates.user import User
from roster.domain.user.value_objects import Email, Username


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Lookups return ``None`` when nothing matches. Mutations (``update`` and
    ``delete``) raise ``UserNotFoundError`` instead.
    """

    @abstractmethod
    async def find_by_id(self, user_id: Union[str, EntityId]) -> Optional[User]:
        """
        Find a user by their ID.

        Parameters
        ----------
        user_id
            The user's unique identifier (UUID4)

        Returns
        -------
        User if found, None otherwise

        Raises
        ------
        InvalidEntityIdError
            If the identifier is not a UUID4
        """

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """
        Find a user by their email address.

        Parameters
        ----------
        email
            The user's email address (string or Email value object)

        Returns
        -------
        User if found, None otherwise

        Raises
        ------
        InvalidEmailError
            If email format is invalid
        """

    @abstractmethod
    async def find_by_username(self, username: Union[str, Username]) -> Optional[User]:
        """Find a user by their username, or None."""

    @abstractmethod
    async def find_all(self) -> list[User]:
        """List all users, oldest first."""

    @abstractmethod
    async def count(self) -> int:
        """Count total users."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """
        Insert a new user.

        Parameters
        ----------
        user
            The user to insert

        Raises
        ------
        EmailAlreadyExistsError
            If email is already in use by another user
        UsernameAlreadyExistsError
            If username is already in use by another user
        """

    @abstractmethod
    async def update(self, user: User) -> None:
        """
        Replace all mutable fields of an existing user.

        Raises
        ------
        UserNotFoundError
            If no stored user has this identity
        EmailAlreadyExistsError
            If the new email belongs to another user
        UsernameAlreadyExistsError
            If the new username belongs to another user
        """

    @abstractmethod
    async def delete(self, user_id: Union[str, EntityId]) -> None:
        """
        Delete a user by ID.

        Raises
        ------
        UserNotFoundError
            If no stored user has this identity
        """
