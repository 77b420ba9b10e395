"""Shared value objects."""

from .identifier import Identifier

__all__ = ["Identifier"]
