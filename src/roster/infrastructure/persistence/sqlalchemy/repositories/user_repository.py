"""SQLAlchemy implementation of UserRepository."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Union

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from roster.domain.shared import (
    ConflictError,
    EntityId,
    PersistenceError,
    ensure_tz_aware,
)
from roster.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UsernameAlreadyExistsError,
    UserNotFoundError,
    UserRepository,
    Username,
)
from roster.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    The repository only flushes; committing is left to the caller that owns
    the session (one session per request in the API).
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: Union[str, EntityId]) -> User | None:
        entity_id = _as_entity_id(user_id)
        with _storage_errors("find user by id"):
            model = await self._find_model_by_id(entity_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: Union[str, Email]) -> User | None:
        email_value = email.value if isinstance(email, Email) else Email(email).value

        stmt = select(UserModel).where(UserModel.email == email_value)
        with _storage_errors("find user by email"):
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_username(self, username: Union[str, Username]) -> User | None:
        username_value = (
            username.value if isinstance(username, Username) else Username(username).value
        )

        stmt = select(UserModel).where(UserModel.username == username_value)
        with _storage_errors("find user by username"):
            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_all(self) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.created_at)
        with _storage_errors("list users"):
            result = await self._session.execute(stmt)
            models = result.scalars().all()
        return [self._map_to_domain(model) for model in models]

    async def count(self) -> int:
        stmt = select(func.count()).select_from(UserModel)
        with _storage_errors("count users"):
            result = await self._session.execute(stmt)
            return result.scalar_one()

    async def save(self, user: User) -> None:
        model = self._map_to_model(user)
        try:
            with _storage_errors("save user"):
                self._session.add(model)
                await self._session.flush()
        except IntegrityError as e:
            raise _conflict_from(e, user) from e

        logger.info("Created user: %s (email: %s)", user.id, user.email)

    async def update(self, user: User) -> None:
        with _storage_errors("update user"):
            model = await self._find_model_by_id(user.id)

        if model is None:
            raise UserNotFoundError(user.id.value)

        self._update_model(model, user)
        try:
            with _storage_errors("update user"):
                await self._session.flush()
        except IntegrityError as e:
            raise _conflict_from(e, user) from e

        logger.debug("Updated user: %s", user.id)

    async def delete(self, user_id: Union[str, EntityId]) -> None:
        entity_id = _as_entity_id(user_id)
        with _storage_errors("delete user"):
            model = await self._find_model_by_id(entity_id)

        if model is None:
            raise UserNotFoundError(entity_id.value)

        with _storage_errors("delete user"):
            await self._session.delete(model)
            await self._session.flush()
        logger.info("Deleted user: %s", entity_id)

    async def _find_model_by_id(self, entity_id: EntityId) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == entity_id.uuid)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=EntityId.from_uuid(model.id),
            email=model.email,
            username=model.username,
            password=model.password_hash,
            role=model.role,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
            connection_status=model.connection_status,
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id.uuid,
            email=user.email.value,
            username=user.username.value,
            password_hash=user.password.value,
            role=user.role.value,
            connection_status=user.connection_status.value,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.email = user.email.value
        model.username = user.username.value
        model.password_hash = user.password.value
        model.role = user.role.value
        model.connection_status = user.connection_status.value
        model.updated_at = user.updated_at


def _as_entity_id(value: Union[str, EntityId]) -> EntityId:
    return value if isinstance(value, EntityId) else EntityId(value)


@contextmanager
def _storage_errors(action: str) -> Iterator[None]:
    """Wrap driver/ORM failures into PersistenceError.

    IntegrityError is let through so callers can map it to a conflict.
    """
    try:
        yield
    except IntegrityError:
        raise
    except SQLAlchemyError as e:
        logger.exception("Storage failure while trying to %s", action)
        msg = f"Failed to {action}"
        raise PersistenceError(msg, details={"error": type(e).__name__}) from e


# Unique index names on PostgreSQL, column references on SQLite
_USERNAME_CONSTRAINTS = ("ix_users_username", "users.username")
_EMAIL_CONSTRAINTS = ("ix_users_email", "users.email")


def _conflict_from(error: IntegrityError, user: User) -> ConflictError:
    """Map a uniqueness violation to the matching domain conflict.

    Only the first line of the driver message is inspected. PostgreSQL adds a
    DETAIL line quoting the offending value, which may contain anything.
    """
    message = str(error.orig if error.orig is not None else error)
    headline = message.splitlines()[0].lower() if message else ""
    if any(name in headline for name in _USERNAME_CONSTRAINTS):
        return UsernameAlreadyExistsError(user.username.value)
    if any(name in headline for name in _EMAIL_CONSTRAINTS):
        return EmailAlreadyExistsError(user.email.value)
    return ConflictError(
        f"User conflicts with existing data: {user.id}",
        details={"user_id": user.id.value},
    )
