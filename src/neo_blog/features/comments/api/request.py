"""Comment request models."""

from pydantic import BaseModel, Field


class CommentContentRequest(BaseModel):
    """Body of a comment or reply create/update."""

    content: str = Field(..., description="Comment text")
