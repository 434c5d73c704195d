import logging
from typing import Union

from roster.domain.shared import EntityId
from roster.domain.user import UserRepository

logger = logging.getLogger(__name__)


class DeleteUserCommand:
    """Command to delete a user."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def execute(self, user_id: Union[str, EntityId]) -> None:
        entity_id = user_id if isinstance(user_id, EntityId) else EntityId(user_id)
        # Repository raises UserNotFoundError for unknown ids
        await self._user_repo.delete(entity_id)
        logger.info("Deleted user %s", entity_id)
