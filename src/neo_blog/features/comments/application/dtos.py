"""Comment read models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List


@dataclass
class CommentResponseDto:
    id: int
    content: str
    author_id: int
    comment_id: int
    post_id: int
    created_at: datetime
    updated_at: datetime


@dataclass
class CommentDto:
    id: int
    content: str
    author_id: int
    post_id: int
    created_at: datetime
    updated_at: datetime
    replies: List[CommentResponseDto] = field(default_factory=list)
