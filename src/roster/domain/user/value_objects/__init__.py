"""Value objects for the user domain."""

from roster.domain.user.value_objects.connection_status import ConnectionStatus
from roster.domain.user.value_objects.email import Email
from roster.domain.user.value_objects.password import Password
from roster.domain.user.value_objects.user_role import UserRole
from roster.domain.user.value_objects.username import Username

__all__ = [
    "ConnectionStatus",
    "Email",
    "Password",
    "UserRole",
    "Username",
]
