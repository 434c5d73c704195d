"""Commands toggling a user's connection status."""

import logging
from typing import Union

from roster.domain.shared import EntityId
from roster.domain.user import User, UserNotFoundError, UserRepository

logger = logging.getLogger(__name__)


class _ConnectionCommand:
    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def _load(self, user_id: Union[str, EntityId]) -> User:
        entity_id = user_id if isinstance(user_id, EntityId) else EntityId(user_id)
        user = await self._user_repo.find_by_id(entity_id)
        if user is None:
            raise UserNotFoundError(entity_id.value)
        return user


class ConnectUserCommand(_ConnectionCommand):
    """Mark a user as connected."""

    async def execute(self, user_id: Union[str, EntityId]) -> User:
        user = await self._load(user_id)
        user.connect()
        await self._user_repo.update(user)
        logger.debug("User %s connected", user.id)
        return user


class DisconnectUserCommand(_ConnectionCommand):
    """Mark a user as disconnected."""

    async def execute(self, user_id: Union[str, EntityId]) -> User:
        user = await self._load(user_id)
        user.disconnect()
        await self._user_repo.update(user)
        logger.debug("User %s disconnected", user.id)
        return user
