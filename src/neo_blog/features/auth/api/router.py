"""Auth API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from ....api.dependencies import CurrentUser, get_auth_service
from ...users.api.response import UserResponse
from ..application import AuthService
from .request import LoginRequest, RegisterRequest
from .response import AuthResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register",
    description="Create a USER account and return an access token for it",
)
async def register(
    request: RegisterRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> AuthResponse:
    payload = await auth_service.register(request.email, request.username, request.password)
    return AuthResponse.model_validate(payload)


@router.post("/login", response_model=AuthResponse, summary="Login")
async def login(
    request: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> AuthResponse:
    payload = await auth_service.login(request.email, request.password)
    return AuthResponse.model_validate(payload)


@router.get("/me", response_model=UserResponse, summary="Current user")
async def me(current_user: CurrentUser) -> UserResponse:
    return UserResponse.model_validate(current_user)
