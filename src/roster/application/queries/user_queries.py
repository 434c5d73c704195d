"""Read-side use cases for users."""

from typing import Union

from roster.domain.shared import EntityId
from roster.domain.user import User, UserNotFoundError, UserRepository


class GetUserQuery:
    """Fetch a single user, failing when it does not exist."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def execute(self, user_id: Union[str, EntityId]) -> User:
        entity_id = user_id if isinstance(user_id, EntityId) else EntityId(user_id)
        user = await self._user_repo.find_by_id(entity_id)
        if user is None:
            raise UserNotFoundError(entity_id.value)
        return user


class ListUsersQuery:
    """List every user, oldest first."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def execute(self) -> list[User]:
        return await self._user_repo.find_all()
