"""SQLAlchemy implementation for roster persistence.

Provides:
- Base: Declarative base for all models
- UserModel: SQLAlchemy model for users
- UserRepositorySQLAlchemy: Repository implementation for users
"""

from roster.infrastructure.persistence.sqlalchemy.models import Base, UserModel
from roster.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
