"""Category request models."""

from pydantic import BaseModel, Field


class CategoryCreateRequest(BaseModel):
    name: str = Field(..., description="Category name")


class CategoryUpdateRequest(BaseModel):
    name: str = Field(..., description="New category name")
