"""User CRUD and presence endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from roster.application.commands import (
    ConnectUserCommand,
    CreateUserCommand,
    DeleteUserCommand,
    DisconnectUserCommand,
    UpdateUserCommand,
)
from roster.application.queries import GetUserQuery, ListUsersQuery
from roster.presentation.api.dependencies import (
    DBSession,
    get_connect_user_command,
    get_create_user_command,
    get_delete_user_command,
    get_disconnect_user_command,
    get_list_users_query,
    get_update_user_command,
    get_user_query,
)
from roster.presentation.api.schemas import (
    CreateUserRequest,
    ErrorResponse,
    MessageResponse,
    UpdateUserRequest,
    UserEnvelope,
    UserListEnvelope,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "User not found"}}
_BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Invalid input"}}
_CONFLICT = {
    409: {"model": ErrorResponse, "description": "Email or username already taken"},
}


@router.get(
    "",
    summary="List all users",
)
async def list_users(
    query: Annotated[ListUsersQuery, Depends(get_list_users_query)],
) -> UserListEnvelope:
    users = await query.execute()
    return UserListEnvelope(
        data=[UserResponse.from_domain(u) for u in users],
        count=len(users),
    )


@router.get(
    "/{user_id}",
    summary="Get a user by id",
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
async def get_user(
    user_id: str,
    query: Annotated[GetUserQuery, Depends(get_user_query)],
) -> UserEnvelope:
    user = await query.execute(user_id)
    return UserEnvelope(data=UserResponse.from_domain(user))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
    responses={**_BAD_REQUEST, **_CONFLICT},
)
async def create_user(
    request: CreateUserRequest,
    session: DBSession,
    command: Annotated[CreateUserCommand, Depends(get_create_user_command)],
) -> UserEnvelope:
    user = await command.execute(
        email=request.email,
        password=request.password,
        username=request.username,
        role=request.role,
    )
    await session.commit()

    return UserEnvelope(
        message="User created successfully",
        data=UserResponse.from_domain(user),
    )


@router.put(
    "/{user_id}",
    summary="Update a user",
    responses={**_BAD_REQUEST, **_NOT_FOUND, **_CONFLICT},
)
async def update_user(
    user_id: str,
    request: UpdateUserRequest,
    session: DBSession,
    command: Annotated[UpdateUserCommand, Depends(get_update_user_command)],
) -> UserEnvelope:
    user = await command.execute(
        user_id=user_id,
        email=request.email,
        username=request.username,
        password=request.password,
        role=request.role,
    )
    await session.commit()

    return UserEnvelope(
        message="User updated successfully",
        data=UserResponse.from_domain(user),
    )


@router.delete(
    "/{user_id}",
    summary="Delete a user",
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
async def delete_user(
    user_id: str,
    session: DBSession,
    command: Annotated[DeleteUserCommand, Depends(get_delete_user_command)],
) -> MessageResponse:
    await command.execute(user_id)
    await session.commit()

    return MessageResponse(message="User deleted successfully")


@router.post(
    "/{user_id}/connect",
    summary="Mark a user as connected",
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
async def connect_user(
    user_id: str,
    session: DBSession,
    command: Annotated[ConnectUserCommand, Depends(get_connect_user_command)],
) -> UserEnvelope:
    user = await command.execute(user_id)
    await session.commit()
    return UserEnvelope(data=UserResponse.from_domain(user))


@router.post(
    "/{user_id}/disconnect",
    summary="Mark a user as disconnected",
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
async def disconnect_user(
    user_id: str,
    session: DBSession,
    command: Annotated[DisconnectUserCommand, Depends(get_disconnect_user_command)],
) -> UserEnvelope:
    user = await command.execute(user_id)
    await session.commit()
    return UserEnvelope(data=UserResponse.from_domain(user))
