"""Identity and timestamps shared by every aggregate.

Aggregates embed an ``EntityIdentity`` instead of inheriting from a base
entity class. The helpers below are the only way to create or refresh one.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta

from roster.domain.shared.time import utc_now
from roster.domain.shared.value_objects.entity_id import EntityId

_MIN_TICK = timedelta(microseconds=1)


@dataclass(frozen=True)
class EntityIdentity:
    """Immutable identity of an aggregate with its lifecycle timestamps."""

    id: EntityId
    created_at: datetime
    updated_at: datetime


def new_identity(entity_id: EntityId | None = None) -> EntityIdentity:
    """Create an identity for a brand-new aggregate.

    ``created_at`` and ``updated_at`` are the same instant.
    """
    now = utc_now()
    return EntityIdentity(
        id=entity_id if entity_id is not None else EntityId.generate(),
        created_at=now,
        updated_at=now,
    )


def touch(identity: EntityIdentity) -> EntityIdentity:
    """Return a copy of ``identity`` with a strictly later ``updated_at``.

    Two calls within the clock resolution would otherwise produce equal
    timestamps, so the new value is at least one microsecond after the old one.
    """
    updated_at = max(utc_now(), identity.updated_at + _MIN_TICK)
    return replace(identity, updated_at=updated_at)
