"""Shared domain components.

This module exports shared value objects, exceptions, and identity helpers
used across domain boundaries.
"""

from roster.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    InvalidEntityIdError,
    PersistenceError,
    ValidationError,
)
from roster.domain.shared.identity import EntityIdentity, new_identity, touch
from roster.domain.shared.time import ensure_tz_aware, utc_now
from roster.domain.shared.value_objects import EntityId

__all__ = [
    # Error codes
    "ErrorCode",
    # Base exception
    "DomainException",
    # Exception categories
    "ValidationError",
    "BusinessRuleViolation",
    "EntityNotFoundError",
    "ConflictError",
    "PersistenceError",
    "InvalidEntityIdError",
    # Identity
    "EntityId",
    "EntityIdentity",
    "new_identity",
    "touch",
    # Utilities
    "ensure_tz_aware",
    "utc_now",
]
