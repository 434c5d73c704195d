"""FastAPI dependency injection for the Roster API.

Provides dependencies for:
- Database engine and sessions (built once, shared across requests)
- The user repository bound to the request session
- Service, command and query instances

Process-wide objects are created lazily on first use and cached; everything
else is constructed per request and receives its collaborators explicitly.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
)

from roster.application.commands import (
    ConnectUserCommand,
    CreateUserCommand,
    DeleteUserCommand,
    DisconnectUserCommand,
    UpdateUserCommand,
)
from roster.application.queries import GetUserQuery, ListUsersQuery
from roster.application.services import PasswordHashingService
from roster.domain.user import UserRepository
from roster.infrastructure.persistence.sqlalchemy.init_db import build_engine
from roster.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from roster.presentation.api.config import get_api_settings
from roster_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


@lru_cache()
def get_database_url() -> str:
    """
    Get database URL from application settings.

    Returns
    -------
    Database URL string
    """
    url = get_settings().database_url

    # Ensure data directory exists for SQLite
    if url.startswith("sqlite") and ":memory:" not in url:
        db_path = url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return url


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.
    """
    return build_engine(get_database_url())


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    """Get the shared async session maker (singleton)."""
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.
    Anything not committed by the handler is rolled back when the session
    closes.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Repositories & Services
# -----------------------------------------------------------------------------


def get_user_repository(session: DBSession) -> UserRepository:
    return UserRepositorySQLAlchemy(session)


def get_password_service(
    settings: Settings = Depends(get_api_settings),
) -> PasswordHashingService:
    """Get password hashing service configured with API settings."""
    return PasswordHashingService(rounds=settings.password_hash_rounds)


UserRepo = Annotated[UserRepository, Depends(get_user_repository)]
PasswordService = Annotated[PasswordHashingService, Depends(get_password_service)]


# -----------------------------------------------------------------------------
# Commands & Queries
# -----------------------------------------------------------------------------


def get_create_user_command(
    user_repo: UserRepo,
    password_service: PasswordService,
) -> CreateUserCommand:
    return CreateUserCommand(
        user_repository=user_repo,
        password_service=password_service,
    )


def get_update_user_command(
    user_repo: UserRepo,
    password_service: PasswordService,
) -> UpdateUserCommand:
    return UpdateUserCommand(
        user_repository=user_repo,
        password_service=password_service,
    )


def get_delete_user_command(user_repo: UserRepo) -> DeleteUserCommand:
    return DeleteUserCommand(user_repository=user_repo)


def get_connect_user_command(user_repo: UserRepo) -> ConnectUserCommand:
    return ConnectUserCommand(user_repository=user_repo)


def get_disconnect_user_command(user_repo: UserRepo) -> DisconnectUserCommand:
    return DisconnectUserCommand(user_repository=user_repo)


def get_user_query(user_repo: UserRepo) -> GetUserQuery:
    return GetUserQuery(user_repository=user_repo)


def get_list_users_query(user_repo: UserRepo) -> ListUsersQuery:
    return ListUsersQuery(user_repository=user_repo)
