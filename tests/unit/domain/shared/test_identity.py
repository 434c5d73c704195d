"""Unit tests for identity helpers."""

from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from roster.domain.shared import EntityId, EntityIdentity, new_identity, touch


class TestNewIdentity:
    def test_timestamps_are_equal(self):
        identity = new_identity()

        assert identity.created_at == identity.updated_at
        assert identity.created_at.tzinfo is not None

    def test_uses_given_id(self):
        entity_id = EntityId.generate()
        assert new_identity(entity_id).id == entity_id

    def test_generates_id_when_missing(self):
        assert new_identity().id != new_identity().id


class TestTouch:
    def test_keeps_id_and_created_at(self):
        identity = new_identity()
        touched = touch(identity)

        assert touched.id == identity.id
        assert touched.created_at == identity.created_at

    def test_returns_new_instance(self):
        identity = new_identity()
        touched = touch(identity)

        assert touched is not identity
        assert identity.updated_at == identity.created_at

    def test_strictly_advances_when_clock_is_frozen(self):
        """A frozen clock still yields a later updated_at."""
        frozen = datetime(2024, 1, 1, tzinfo=timezone.utc)
        identity = EntityIdentity(
            id=EntityId.generate(),
            created_at=frozen,
            updated_at=frozen,
        )

        with patch("roster.domain.shared.identity.utc_now", return_value=frozen):
            first = touch(identity)
            second = touch(first)

        assert first.updated_at == frozen + timedelta(microseconds=1)
        assert second.updated_at > first.updated_at

    def test_strictly_advances_when_clock_goes_backwards(self):
        future = datetime(2100, 1, 1, tzinfo=timezone.utc)
        identity = EntityIdentity(
            id=EntityId.generate(),
            created_at=future,
            updated_at=future,
        )

        assert touch(identity).updated_at > future
