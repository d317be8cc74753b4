"""Hand-off point for webhook requests that passed signature validation."""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventParams:
    """A verified event: topic, untouched body bytes and delivery metadata."""

    topic: str
    event_payload: bytes
    metadata: dict[str, str] = field(default_factory=dict)


class EventPublisher(Protocol):
    async def publish(self, params: EventParams) -> None: ...


class InMemoryEventPublisher:
    """Keeps the most recent published events in memory.

    Stand-in for the real event broker, which lives outside this service.
    Only the last ``max_events`` events are retained.
    """

    def __init__(self, max_events: int = 100) -> None:
        self._events: deque[EventParams] = deque(maxlen=max_events)

    async def publish(self, params: EventParams) -> None:
        self._events.append(params)
        logger.info(
            "Published webhook event",
            extra={
                "topic": params.topic,
                "github_event": params.metadata.get("x-github-event"),
                "size": len(params.event_payload),
            },
        )

    def list_all(self) -> list[EventParams]:
        return list(self._events)

    def clear(self) -> None:
        self._events.clear()
