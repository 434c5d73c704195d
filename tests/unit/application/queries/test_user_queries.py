"""Unit tests for user queries."""

from unittest.mock import AsyncMock

import pytest

from roster.application.queries import GetUserQuery, ListUsersQuery
from roster.domain.shared import EntityId, InvalidEntityIdError
from roster.domain.user import UserNotFoundError
from tests.shared.fixtures.factories import TestUserFactory


class TestGetUserQuery:
    def setup_method(self):
        self.user_repo = AsyncMock()
        self.query = GetUserQuery(user_repository=self.user_repo)

    @pytest.mark.asyncio
    async def test_returns_user(self):
        alice = TestUserFactory.alice()
        self.user_repo.find_by_id.return_value = alice

        result = await self.query.execute(TestUserFactory.ALICE_ID)

        assert result is alice
        self.user_repo.find_by_id.assert_awaited_once_with(
            EntityId(TestUserFactory.ALICE_ID),
        )

    @pytest.mark.asyncio
    async def test_missing_user_raises(self):
        self.user_repo.find_by_id.return_value = None

        with pytest.raises(UserNotFoundError) as exc_info:
            await self.query.execute(TestUserFactory.UNKNOWN_ID)

        assert exc_info.value.user_id == TestUserFactory.UNKNOWN_ID

    @pytest.mark.asyncio
    async def test_invalid_id_never_reaches_repository(self):
        with pytest.raises(InvalidEntityIdError):
            await self.query.execute("not-an-id")

        self.user_repo.find_by_id.assert_not_called()


class TestListUsersQuery:
    @pytest.mark.asyncio
    async def test_returns_repository_result(self):
        users = [TestUserFactory.alice(), TestUserFactory.bob()]
        user_repo = AsyncMock()
        user_repo.find_all.return_value = users

        result = await ListUsersQuery(user_repository=user_repo).execute()

        assert result == users

    @pytest.mark.asyncio
    async def test_empty(self):
        user_repo = AsyncMock()
        user_repo.find_all.return_value = []

        assert await ListUsersQuery(user_repository=user_repo).execute() == []
