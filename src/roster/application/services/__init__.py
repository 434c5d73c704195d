"""Application services."""

from roster.application.services.password_service import PasswordHashingService

__all__ = ["PasswordHashingService"]
