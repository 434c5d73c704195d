"""Unit tests for EntityId value object."""

from uuid import UUID, uuid1, uuid4

import pytest

from roster.domain.shared import EntityId, ErrorCode, InvalidEntityIdError, ValidationError


class TestEntityId:
    """Tests for EntityId validation and helpers."""

    def test_accepts_uuid4(self):
        value = str(uuid4())
        assert EntityId(value).value == value

    def test_normalizes_to_lowercase(self):
        """Upper-case input is accepted and stored lower-case."""
        value = "AAAAAAAA-AAAA-4AAA-AAAA-AAAAAAAAAAAA"
        entity_id = EntityId(value)

        assert entity_id.value == value.lower()
        assert entity_id == EntityId(value.lower())

    @pytest.mark.parametrize(
        "value",
        [
            "not-a-uuid",
            "12345678-1234-5678-1234-567812345678",  # version 5
            "aaaaaaaa-aaaa-4aaa-caaa-aaaaaaaaaaaa",  # bad variant
            "aaaaaaaaaaaa4aaaaaaaaaaaaaaaaaaa",  # no hyphens
            " aaaaaaaa-aaaa-4aaa-aaaa-aaaaaaaaaaaa",
            "aaaaaaaa-aaaa-4aaa-aaaa-aaaaaaaaaaaa\n",  # trailing newline
        ],
    )
    def test_rejects_malformed_values(self, value):
        with pytest.raises(InvalidEntityIdError) as exc_info:
            EntityId(value)

        assert exc_info.value.code == ErrorCode.INVALID_ENTITY_ID
        assert exc_info.value.details["constraint"] == "format"

    def test_rejects_uuid1(self):
        """Only version 4 identifiers are valid."""
        with pytest.raises(InvalidEntityIdError):
            EntityId(str(uuid1()))

    def test_rejects_empty(self):
        with pytest.raises(InvalidEntityIdError) as exc_info:
            EntityId("")

        assert exc_info.value.details["constraint"] == "empty"

    def test_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            EntityId("nope")

    def test_generate_produces_unique_v4_ids(self):
        ids = {EntityId.generate() for _ in range(100)}

        assert len(ids) == 100
        assert all(e.uuid.version == 4 for e in ids)

    def test_from_uuid_round_trips(self):
        raw = uuid4()
        entity_id = EntityId.from_uuid(raw)

        assert entity_id.uuid == raw
        assert isinstance(entity_id.uuid, UUID)
        assert entity_id.hex == raw.hex

    def test_str_is_value(self):
        entity_id = EntityId.generate()
        assert str(entity_id) == entity_id.value

    def test_immutable(self):
        entity_id = EntityId.generate()
        with pytest.raises(AttributeError):
            entity_id.value = str(uuid4())  # type: ignore[misc]
