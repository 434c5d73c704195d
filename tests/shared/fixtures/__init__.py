"""Shared pytest fixtures and fakes for all test layers."""

from tests.shared.fixtures.database import (
    pg_session,
    pg_url,
    postgres_container,
    sqlite_engine,
    sqlite_session,
)
from tests.shared.fixtures.factories import FAKE_HASH, TestUserFactory
from tests.shared.fixtures.in_memory import InMemoryUserRepository

__all__ = [
    "FAKE_HASH",
    "InMemoryUserRepository",
    "TestUserFactory",
    "pg_session",
    "pg_url",
    "postgres_container",
    "sqlite_engine",
    "sqlite_session",
]
