"""Application plumbing shared by every feature."""

from .bus import CommandBus, QueryBus, MessageHandler
from .pipeline import DeleteResultDto, save_and_publish, require_read_model

__all__ = [
    "CommandBus",
    "QueryBus",
    "MessageHandler",
    "DeleteResultDto",
    "save_and_publish",
    "require_read_model",
]
