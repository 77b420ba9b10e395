"""Post request models."""

from typing import List, Optional

from pydantic import BaseModel, Field


class PostCreateRequest(BaseModel):
    title: str = Field(..., description="Post title")
    content: str = Field(..., description="Post body")
    category_ids: List[int] = Field(default_factory=list, description="Categories of the post")


class PostUpdateRequest(BaseModel):
    """Omitted fields are left unchanged; ``category_ids`` replaces the whole set."""

    title: Optional[str] = Field(None, description="New title")
    content: Optional[str] = Field(None, description="New body")
    category_ids: Optional[List[int]] = Field(None, description="Complete category set")
    published: Optional[bool] = Field(None, description="Publish or unpublish")
