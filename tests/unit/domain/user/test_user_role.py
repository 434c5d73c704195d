"""Unit tests for UserRole."""

import pytest

from roster.domain.shared import ErrorCode
from roster.domain.user import InvalidRoleError, UserRole


class TestUserRole:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("admin", UserRole.ADMIN),
            ("Moderator", UserRole.MODERATOR),
            ("USER", UserRole.USER),
            ("guest", UserRole.GUEST),
        ],
    )
    def test_create_is_case_insensitive(self, value, expected):
        assert UserRole.create(value) is expected

    def test_create_passes_enum_through(self):
        assert UserRole.create(UserRole.ADMIN) is UserRole.ADMIN

    def test_invalid_role(self):
        with pytest.raises(InvalidRoleError) as exc_info:
            UserRole.create("superuser")

        assert exc_info.value.code == ErrorCode.INVALID_ROLE
        assert exc_info.value.role == "superuser"
        assert "admin" in exc_info.value.message

    @pytest.mark.parametrize("value", [" admin ", "admin\n", "\tguest"])
    def test_surrounding_whitespace_is_rejected(self, value):
        """Roles are case-folded but never trimmed."""
        with pytest.raises(InvalidRoleError):
            UserRole.create(value)

    def test_predicates(self):
        assert UserRole.ADMIN.is_admin
        assert UserRole.MODERATOR.is_moderator
        assert UserRole.USER.is_user
        assert UserRole.GUEST.is_guest
        assert not UserRole.USER.is_admin

    def test_str_is_value(self):
        assert str(UserRole.MODERATOR) == "moderator"
