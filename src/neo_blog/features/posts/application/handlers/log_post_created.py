"""Logs every newly created post."""

import logging

from ...core.events import PostCreatedEvent

logger = logging.getLogger(__name__)


class LogPostCreatedHandler:
    async def handle(self, event: PostCreatedEvent) -> None:
        logger.info(
            f"Post created: ID {event.aggregate_id.value} by author {event.author_id.value} "
            f"at {event.occurred_on.isoformat()}"
        )
