"""Post response models."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class PostResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Post ID")
    title: str = Field(..., description="Post title")
    content: str = Field(..., description="Post body")
    published: bool = Field(..., description="Publication state")
    author_id: int = Field(..., description="Author user ID")
    category_ids: List[int] = Field(default_factory=list, description="Category IDs")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")


class PostListResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    posts: List[PostResponse] = Field(default_factory=list, description="Posts on this page")
    total: int = Field(..., description="Posts matching the filters")
    skip: int = Field(..., description="Offset of this page")
    take: int = Field(..., description="Page size")
    has_more: bool = Field(..., description="Whether another page exists")
