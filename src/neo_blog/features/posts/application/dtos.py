"""Post read models."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List


@dataclass
class PostDto:
    id: int
    title: str
    content: str
    published: bool
    author_id: int
    category_ids: List[int]
    created_at: datetime
    updated_at: datetime


@dataclass
class PostListDto:
    """One page of posts plus paging metadata."""
    posts: List[PostDto] = field(default_factory=list)
    total: int = 0
    skip: int = 0
    take: int = 10
    has_more: bool = False
