"""Unit tests for ConnectionStatus."""

import pytest

from roster.domain.shared import ErrorCode
from roster.domain.user import ConnectionStatus, InvalidConnectionStatusError


class TestConnectionStatus:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("connected", ConnectionStatus.CONNECTED),
            ("DISCONNECTED", ConnectionStatus.DISCONNECTED),
            (True, ConnectionStatus.CONNECTED),
            (False, ConnectionStatus.DISCONNECTED),
            (ConnectionStatus.CONNECTED, ConnectionStatus.CONNECTED),
        ],
    )
    def test_create(self, value, expected):
        assert ConnectionStatus.create(value) is expected

    def test_invalid(self):
        with pytest.raises(InvalidConnectionStatusError) as exc_info:
            ConnectionStatus.create("away")

        assert exc_info.value.code == ErrorCode.INVALID_CONNECTION_STATUS

    @pytest.mark.parametrize("value", [" connected ", "disconnected\n"])
    def test_surrounding_whitespace_is_rejected(self, value):
        with pytest.raises(InvalidConnectionStatusError):
            ConnectionStatus.create(value)

    def test_is_connected(self):
        assert ConnectionStatus.CONNECTED.is_connected
        assert not ConnectionStatus.DISCONNECTED.is_connected
