"""Application commands for user management."""

from roster.application.commands.connection_commands import (
    ConnectUserCommand,
    DisconnectUserCommand,
)
from roster.application.commands.create_user_command import CreateUserCommand
from roster.application.commands.delete_user_command import DeleteUserCommand
from roster.application.commands.update_user_command import UpdateUserCommand

__all__ = [
    "ConnectUserCommand",
    "CreateUserCommand",
    "DeleteUserCommand",
    "DisconnectUserCommand",
    "UpdateUserCommand",
]
