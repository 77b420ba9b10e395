"""Category API endpoints."""

import logging
from typing import List

from fastapi import APIRouter, status

from ....api.dependencies import AdminUser, Commands, CurrentUser, Queries
from ....api.models import DeleteResponse
from ..application.commands import (
    CreateCategoryCommand,
    DeleteCategoryCommand,
    UpdateCategoryCommand,
)
from ..application.queries import GetAllCategoriesQuery, GetCategoryByIdQuery
from ..core.exceptions import CategoryNotFoundError
from .request import CategoryCreateRequest, CategoryUpdateRequest
from .response import CategoryResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=List[CategoryResponse], summary="List categories")
async def list_categories(current_user: CurrentUser, query_bus: Queries) -> List[CategoryResponse]:
    categories = await query_bus.execute(GetAllCategoriesQuery())
    return [CategoryResponse.model_validate(category) for category in categories]


@router.get("/{category_id}", response_model=CategoryResponse, summary="Get category")
async def get_category(category_id: int, current_user: CurrentUser, query_bus: Queries) -> CategoryResponse:
    category = await query_bus.execute(GetCategoryByIdQuery(category_id))
    if category is None:
        raise CategoryNotFoundError(f"ID: {category_id}")
    return CategoryResponse.model_validate(category)


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
    description="Admin only",
)
async def create_category(
    request: CategoryCreateRequest, admin: AdminUser, command_bus: Commands
) -> CategoryResponse:
    category = await command_bus.execute(CreateCategoryCommand(name=request.name))
    return CategoryResponse.model_validate(category)


@router.patch("/{category_id}", response_model=CategoryResponse, summary="Rename category")
async def update_category(
    category_id: int, request: CategoryUpdateRequest, admin: AdminUser, command_bus: Commands
) -> CategoryResponse:
    category = await command_bus.execute(
        UpdateCategoryCommand(category_id=category_id, name=request.name)
    )
    return CategoryResponse.model_validate(category)


@router.delete("/{category_id}", response_model=DeleteResponse, summary="Delete category")
async def delete_category(category_id: int, admin: AdminUser, command_bus: Commands) -> DeleteResponse:
    result = await command_bus.execute(DeleteCategoryCommand(category_id=category_id))
    return DeleteResponse.model_validate(result)
