"""User API endpoints."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Query, status

from ....api.dependencies import AdminUser, Commands, CurrentUser, Queries
from ....api.models import DeleteResponse
from ....core.exceptions import ForbiddenError
from ..application.commands import CreateUserCommand, DeleteUserCommand, UpdateUserCommand
from ..application.queries import GetAllUsersQuery, GetUserByEmailQuery, GetUserByIdQuery
from ..core.exceptions import UserNotFoundError
from .request import UserCreateRequest, UserUpdateRequest
from .response import UserResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["Users"])


@router.get(
    "",
    response_model=List[UserResponse],
    summary="List users",
    description="Look a user up by email, or list every user (admin only)",
)
async def list_users(
    current_user: CurrentUser,
    query_bus: Queries,
    email: Optional[str] = Query(None, description="Exact email address"),
) -> List[UserResponse]:
    if email is not None:
        user = await query_bus.execute(GetUserByEmailQuery(email))
        return [UserResponse.model_validate(user)] if user else []

    if not current_user.is_admin:
        raise ForbiddenError("Insufficient role.")
    users = await query_bus.execute(GetAllUsersQuery())
    return [UserResponse.model_validate(user) for user in users]


@router.get("/{user_id}", response_model=UserResponse, summary="Get user")
async def get_user(user_id: int, current_user: CurrentUser, query_bus: Queries) -> UserResponse:
    user = await query_bus.execute(GetUserByIdQuery(user_id))
    if user is None:
        raise UserNotFoundError(f"ID: {user_id}")
    return UserResponse.model_validate(user)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    description="Admin only; unlike registration the role can be chosen",
)
async def create_user(request: UserCreateRequest, admin: AdminUser, command_bus: Commands) -> UserResponse:
    user = await command_bus.execute(
        CreateUserCommand(
            email=request.email,
            username=request.username,
            password=request.password,
            role=request.role,
        )
    )
    return UserResponse.model_validate(user)


@router.patch("/{user_id}", response_model=UserResponse, summary="Update user")
async def update_user(
    user_id: int, request: UserUpdateRequest, current_user: CurrentUser, command_bus: Commands
) -> UserResponse:
    if current_user.id != user_id and not current_user.is_admin:
        raise ForbiddenError("You do not have permission to modify this resource.")
    if request.role is not None and not current_user.is_admin:
        raise ForbiddenError("Insufficient role.")

    user = await command_bus.execute(
        UpdateUserCommand(
            user_id=user_id,
            email=request.email,
            username=request.username,
            role=request.role,
            password=request.password,
        )
    )
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", response_model=DeleteResponse, summary="Delete user")
async def delete_user(user_id: int, admin: AdminUser, command_bus: Commands) -> DeleteResponse:
    result = await command_bus.execute(DeleteUserCommand(user_id=user_id))
    return DeleteResponse.model_validate(result)
