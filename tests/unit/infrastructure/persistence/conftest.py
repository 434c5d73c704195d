"""Pytest fixtures for infrastructure persistence tests.

Each test gets a fresh in-memory SQLite database.
"""

from tests.shared.fixtures.database import sqlite_engine, sqlite_session  # noqa: F401
