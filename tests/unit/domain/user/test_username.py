"""Unit tests for Username value object."""

import pytest

from roster.domain.shared import ErrorCode
from roster.domain.user import InvalidUsernameError, Username


class TestUsername:
    @pytest.mark.parametrize("value", ["abc", "Ada_Lovelace", "user_123", "a" * 30])
    def test_valid(self, value):
        assert Username(value).value == value

    def test_case_is_preserved(self):
        assert Username("MixedCase").value == "MixedCase"

    @pytest.mark.parametrize("value", ["ab", "a" * 31])
    def test_length_bounds(self, value):
        with pytest.raises(InvalidUsernameError) as exc_info:
            Username(value)

        assert exc_info.value.code == ErrorCode.INVALID_USERNAME
        assert exc_info.value.details["constraint"] == "length"

    @pytest.mark.parametrize(
        "value",
        ["has space", "dash-ed", "dot.ted", "émile", "abc\n", "abc\ndef"],
    )
    def test_invalid_characters(self, value):
        with pytest.raises(InvalidUsernameError) as exc_info:
            Username(value)

        assert exc_info.value.details["constraint"] == "format"

    @pytest.mark.parametrize("value", ["", "    "])
    def test_empty(self, value):
        with pytest.raises(InvalidUsernameError) as exc_info:
            Username(value)

        assert exc_info.value.details["constraint"] == "empty"

    def test_trailing_newline_is_rejected(self):
        """A newline after otherwise valid characters is a format error."""
        with pytest.raises(InvalidUsernameError) as exc_info:
            Username("alice\n")

        assert exc_info.value.details["constraint"] == "format"
