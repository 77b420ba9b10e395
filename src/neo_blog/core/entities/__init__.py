"""Shared entity base."""

from .base_entity import BaseEntity

__all__ = ["BaseEntity"]
