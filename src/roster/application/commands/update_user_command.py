import logging
from typing import Optional, Union

from roster.application.services import PasswordHashingService
from roster.domain.shared import EntityId, ValidationError
from roster.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UsernameAlreadyExistsError,
    UserNotFoundError,
    UserRepository,
    UserRole,
    Username,
)

logger = logging.getLogger(__name__)


class UpdateUserCommand:
    """Command to partially update a user's email, username, password or role.

    Only the fields that are given are changed. All new values are validated
    before the aggregate is touched, so a rejected update leaves it as it was.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service

    async def execute(  # NOQA: PLR0913
        self,
        user_id: Union[str, EntityId],
        email: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        role: Optional[str] = None,
    ) -> User:
        if email is None and username is None and password is None and role is None:
            msg = "At least one field is required for update"
            raise ValidationError(msg)

        entity_id = user_id if isinstance(user_id, EntityId) else EntityId(user_id)
        email_obj = Email(email) if email is not None else None
        username_obj = Username(username) if username is not None else None
        role_obj = UserRole.create(role) if role is not None else None
        password_obj = (
            self._password_service.hash(password) if password is not None else None
        )

        user = await self._user_repo.find_by_id(entity_id)
        if user is None:
            raise UserNotFoundError(entity_id.value)

        if email_obj is not None and email_obj != user.email:
            other = await self._user_repo.find_by_email(email_obj)
            if other is not None and other.id != user.id:
                raise EmailAlreadyExistsError(email_obj.value)
            user.change_email(email_obj)

        if username_obj is not None and username_obj != user.username:
            other = await self._user_repo.find_by_username(username_obj)
            if other is not None and other.id != user.id:
                raise UsernameAlreadyExistsError(username_obj.value)
            user.change_username(username_obj)

        if password_obj is not None:
            user.change_password(password_obj)

        if role_obj is not None:
            user.change_role(role_obj)

        await self._user_repo.update(user)

        logger.info("Updated user %s", user.id)
        return user
