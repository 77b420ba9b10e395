"""User event subscribers."""

from .log_user_created import LogUserCreatedHandler

__all__ = ["LogUserCreatedHandler"]
