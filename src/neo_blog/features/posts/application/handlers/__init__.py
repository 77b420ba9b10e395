"""Post event subscribers."""

from .log_post_created import LogPostCreatedHandler

__all__ = ["LogPostCreatedHandler"]
