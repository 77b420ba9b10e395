"""Comment response models."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class CommentReplyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Reply ID")
    content: str = Field(..., description="Reply text")
    author_id: int = Field(..., description="Author user ID")
    comment_id: int = Field(..., description="Parent comment ID")
    post_id: int = Field(..., description="Post ID")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")


class CommentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Comment ID")
    content: str = Field(..., description="Comment text")
    author_id: int = Field(..., description="Author user ID")
    post_id: int = Field(..., description="Post ID")
    replies: List[CommentReplyResponse] = Field(default_factory=list, description="Replies, oldest first")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")
