"""
In-process fan-out of site settings changes.

Each SSE subscriber owns a bounded asyncio.Queue. Publishing never blocks:
a subscriber whose queue is full misses that update and picks up current
values on its next snapshot.

Dependencies: asyncio (stdlib)
System role: Push channel between the settings service and SSE streams
"""

import asyncio
import logging
from typing import Any

logger = logging.getLogger(__name__)


class SettingsBroadcaster:
    """Fan out settings update events to all live subscribers."""

    def __init__(self, queue_size: int = 16) -> None:
        self.queue_size = queue_size
        self._subscribers: set[asyncio.Queue] = set()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self) -> asyncio.Queue:
        """Register a new subscriber and return its queue."""
        queue: asyncio.Queue = asyncio.Queue(maxsize=self.queue_size)
        self._subscribers.add(queue)
        logger.debug(
            "Settings subscriber added",
            extra={"subscribers": len(self._subscribers)},
        )
        return queue

    def unsubscribe(self, queue: asyncio.Queue) -> None:
        self._subscribers.discard(queue)
        logger.debug(
            "Settings subscriber removed",
            extra={"subscribers": len(self._subscribers)},
        )

    def publish(self, event: dict[str, Any]) -> int:
        """
        Deliver an event to every subscriber without blocking.

        Args:
            event: JSON-serializable event payload

        Returns:
            int: Number of subscribers that received the event
        """
        delivered = 0
        for queue in list(self._subscribers):
            try:
                queue.put_nowait(event)
                delivered += 1
            except asyncio.QueueFull:
                logger.warning(
                    "Dropping settings update for slow subscriber",
                    extra={"event_type": event.get("type")},
                )
        return delivered


_broadcaster: SettingsBroadcaster | None = None


def get_settings_broadcaster() -> SettingsBroadcaster:
    """Process-wide broadcaster singleton."""
    global _broadcaster
    if _broadcaster is None:
        from mangaverse.configs import get_settings

        _broadcaster = SettingsBroadcaster(
            queue_size=get_settings().settings_stream.queue_size
        )
    return _broadcaster
