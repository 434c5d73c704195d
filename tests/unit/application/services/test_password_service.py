"""Unit tests for PasswordHashingService."""

import pytest

from roster.application.services import PasswordHashingService
from roster.domain.user import Password, WeakPasswordError

TEST_PASSWORD = "secure_password_123"


class TestPasswordHashingService:
    """Tests for hashing, verification and strength rules."""

    def setup_method(self):
        # Minimum bcrypt work factor keeps the tests fast
        self.service = PasswordHashingService(rounds=4)

    def test_hash_returns_password_value_object(self):
        hashed = self.service.hash(TEST_PASSWORD)

        assert isinstance(hashed, Password)
        assert hashed.value != TEST_PASSWORD
        assert hashed.value.startswith("$2b$04$")

    def test_hashes_are_salted(self):
        assert self.service.hash(TEST_PASSWORD) != self.service.hash(TEST_PASSWORD)

    def test_verify(self):
        hashed = self.service.hash(TEST_PASSWORD)

        assert self.service.verify(TEST_PASSWORD, hashed)
        assert self.service.verify(TEST_PASSWORD, hashed.value)
        assert not self.service.verify("wrong_password", hashed)

    def test_verify_with_malformed_hash_is_false(self):
        assert not self.service.verify(TEST_PASSWORD, "not-a-bcrypt-hash")

    @pytest.mark.parametrize("password", ["", "short", "x" * 129])
    def test_weak_passwords_rejected(self, password):
        with pytest.raises(WeakPasswordError):
            self.service.hash(password)

    def test_bcrypt_byte_limit_enforced(self):
        """Multibyte characters count by their encoded size."""
        password = "é" * 40  # 80 bytes in UTF-8

        with pytest.raises(WeakPasswordError):
            self.service.validate_strength(password)

    def test_boundary_lengths_accepted(self):
        self.service.validate_strength("x" * 8)
        self.service.validate_strength("x" * 72)

    def test_needs_rehash(self):
        hashed = self.service.hash(TEST_PASSWORD)

        assert not self.service.needs_rehash(hashed)
        assert PasswordHashingService(rounds=5).needs_rehash(hashed)
        assert self.service.needs_rehash("garbage")
