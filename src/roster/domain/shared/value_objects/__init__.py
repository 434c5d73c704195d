"""Value objects shared across aggregates."""

from roster.domain.shared.value_objects.entity_id import EntityId

__all__ = [
    "EntityId",
]
