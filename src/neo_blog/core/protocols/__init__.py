"""Collaborator protocols the application layer depends on."""

from .event_publisher import EventPublisher
from .password_hasher import PasswordHasher

__all__ = ["EventPublisher", "PasswordHasher"]
