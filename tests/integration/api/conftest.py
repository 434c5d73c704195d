"""Pytest fixtures for API integration tests.

The app runs against an in-memory SQLite database. Every database call,
including table creation, goes through the TestClient's event loop.
"""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from roster.infrastructure.persistence.sqlalchemy.init_db import create_tables
from roster.presentation.api.app import API_V1_PREFIX, create_app
from roster.presentation.api.config import get_api_settings
from roster.presentation.api.dependencies import get_db_session
from roster_config.settings import Settings


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def users_url(api_v1_prefix) -> str:
    return f"{api_v1_prefix}/users"


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled and cheap password hashing."""
    return Settings(
        postgres_password=SecretStr("test-password"),
        api_host="127.0.0.1",
        api_port=8000,
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        password_hash_rounds=4,
    )


@pytest.fixture
def test_client(api_settings):
    """Create a test client with an in-memory database."""
    app = create_app(settings=api_settings, with_lifespan=False)

    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    test_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    # Override the database session dependency
    async def override_get_db_session():
        async with test_session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_api_settings] = lambda: api_settings

    with TestClient(app) as client:
        client.portal.call(create_tables, engine)
        yield client
        client.portal.call(engine.dispose)


@pytest.fixture
def new_user_data() -> dict:
    """Valid creation payload."""
    return {
        "email": "Ada@Example.com",
        "password": "correct-horse-battery",
        "username": "ada",
    }


@pytest.fixture
def created_user(test_client, users_url, new_user_data) -> dict:
    """A user created through the API, as returned in the response data."""
    response = test_client.post(users_url, json=new_user_data)
    assert response.status_code == 201
    return response.json()["data"]
