"""Logs every newly registered user."""

import logging

from ...core.events import UserCreatedEvent

logger = logging.getLogger(__name__)


class LogUserCreatedHandler:
    async def handle(self, event: UserCreatedEvent) -> None:
        logger.info(
            f"User created: ID {event.aggregate_id.value} ({event.username}, {event.email})"
        )
