import logging
from typing import Optional

from roster.application.services import PasswordHashingService
from roster.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UsernameAlreadyExistsError,
    UserRepository,
    UserRole,
    Username,
)

logger = logging.getLogger(__name__)


class CreateUserCommand:
    """Command to create a new user."""

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service

    async def execute(
        self,
        email: str,
        password: str,
        username: Optional[str] = None,
        role: Optional[str] = None,
    ) -> User:
        # Build every value object before touching the repository
        email_obj = Email(email)
        username_obj = Username(username) if username is not None else None
        role_obj = UserRole.create(role) if role is not None else None
        password_obj = self._password_service.hash(password)

        if await self._user_repo.find_by_email(email_obj):
            raise EmailAlreadyExistsError(email_obj.value)
        if username_obj and await self._user_repo.find_by_username(username_obj):
            raise UsernameAlreadyExistsError(username_obj.value)

        user = User.create(
            email=email_obj,
            password=password_obj,
            username=username_obj,
            role=role_obj,
        )
        await self._user_repo.save(user)

        logger.info("Created user %s (%s)", user.id, user.username)
        return user
