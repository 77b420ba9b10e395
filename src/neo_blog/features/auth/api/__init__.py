"""Authentication HTTP endpoints."""

from .router import router

__all__ = ["router"]
