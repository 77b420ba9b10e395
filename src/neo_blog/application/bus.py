"""Command and query dispatchers.

Each command or query dataclass is dispatched to exactly one handler,
registered by message type. Handlers expose ``async execute(message)``.
"""

import logging
from typing import Any, Dict, Protocol, Type, runtime_checkable

from ..core.exceptions import ConfigurationError, HandlerNotFoundError

logger = logging.getLogger(__name__)


@runtime_checkable
class MessageHandler(Protocol):
    """Anything with an async ``execute`` method."""

    async def execute(self, message: Any) -> Any:
        ...


class _MessageBus:
    kind = "message"

    def __init__(self):
        self._handlers: Dict[Type[Any], MessageHandler] = {}

    def register(self, message_type: Type[Any], handler: MessageHandler) -> None:
        """Register the handler for ``message_type``.

        Raises:
            ConfigurationError: if the type already has a handler
        """
        if message_type in self._handlers:
            raise ConfigurationError(
                f"A {self.kind} handler is already registered for {message_type.__name__}"
            )
        self._handlers[message_type] = handler

    def is_registered(self, message_type: Type[Any]) -> bool:
        return message_type in self._handlers

    async def execute(self, message: Any) -> Any:
        handler = self._handlers.get(type(message))
        if handler is None:
            raise HandlerNotFoundError(
                f"No {self.kind} handler registered for {type(message).__name__}"
            )
        logger.debug(f"Dispatching {type(message).__name__} to {type(handler).__name__}")
        return await handler.execute(message)


class CommandBus(_MessageBus):
    """Dispatches commands (state changes)."""

    kind = "command"


class QueryBus(_MessageBus):
    """Dispatches queries (side-effect-free reads)."""

    kind = "query"
