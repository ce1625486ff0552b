"""
propcore/engine/event_bus.py

In-memory publish/subscribe bus.

Carries the fire-and-forget "operation succeeded / failed" signals emitted
after store mutations and rejected input. Handlers run synchronously in
publish order; a failing handler never affects the others or the publisher.
"""
from typing import Any, Callable, Deque, Dict, List, Optional, Tuple
from dataclasses import dataclass, field
from datetime import datetime
from collections import deque
import logging
import threading
import uuid

logger = logging.getLogger(__name__)

EventHandler = Callable[["Event"], None]

# subscribing to this type receives every event
ALL_EVENTS = "*"


def _generate_event_id() -> str:
    return f"{datetime.now().strftime('%Y%m%d%H%M%S')}_{uuid.uuid4().hex[:8]}"


@dataclass
class Event:
    """
    Event envelope.

    Attributes:
        event_type: Dotted type, e.g. "entity.created"
        timestamp: Publication time
        data: Event payload
        source: Emitting component
        event_id: Unique id
    """

    event_type: str
    timestamp: datetime
    data: Dict[str, Any]
    source: str = ""
    event_id: str = field(default_factory=_generate_event_id)


@dataclass
class PublishResult:
    """Outcome of one publish call."""

    event_type: str
    subscriber_count: int
    success_count: int = 0
    failure_count: int = 0
    errors: List[Tuple[Callable, Exception]] = field(default_factory=list)


@dataclass
class EventBusStatistics:
    total_published: int = 0
    total_processed: int = 0
    total_failed: int = 0
    subscriber_count: Dict[str, int] = field(default_factory=dict)


class EventBus:
    """
    Event bus owned by one application instance.

    Features:
    - per-type and catch-all subscriptions
    - bounded history (newest last)
    - handler exception isolation
    - statistics

    Example:
        >>> bus = EventBus()
        >>> seen = []
        >>> bus.subscribe("entity.created", seen.append)
        >>> _ = bus.publish(Event("entity.created", datetime.now(), {}))
        >>> len(seen)
        1
    """

    def __init__(self, history_size: int = 100):
        self._subscribers: Dict[str, List[EventHandler]] = {}
        self._history: Deque[Event] = deque(maxlen=history_size)
        self._lock = threading.RLock()
        self._stats = EventBusStatistics()

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        with self._lock:
            handlers = self._subscribers.setdefault(event_type, [])
            if handler not in handlers:
                handlers.append(handler)
                logger.debug(f"Handler {_handler_name(handler)} subscribed to {event_type}")

    def unsubscribe(self, event_type: str, handler: EventHandler) -> None:
        with self._lock:
            handlers = self._subscribers.get(event_type, [])
            if handler in handlers:
                handlers.remove(handler)
                logger.debug(f"Handler {_handler_name(handler)} unsubscribed from {event_type}")

    def publish(self, event: Event) -> PublishResult:
        """
        Deliver an event to its subscribers synchronously.

        Args:
            event: Event to publish

        Returns:
            PublishResult with per-handler success / failure counts
        """
        with self._lock:
            self._history.append(event)
            self._stats.total_published += 1
            handlers = [
                *self._subscribers.get(event.event_type, []),
                *self._subscribers.get(ALL_EVENTS, []),
            ]

        result = PublishResult(event_type=event.event_type, subscriber_count=len(handlers))
        for handler in handlers:
            try:
                handler(event)
                result.success_count += 1
                self._stats.total_processed += 1
            except Exception as e:
                result.failure_count += 1
                result.errors.append((handler, e))
                self._stats.total_failed += 1
                logger.error(
                    f"Event handler {_handler_name(handler)} error for {event.event_type}: {e}",
                    exc_info=True,
                )
        return result

    def get_history(self, event_type: Optional[str] = None, limit: int = 50) -> List[Event]:
        """Recent events, newest first."""
        with self._lock:
            history = list(self._history)
        if event_type:
            history = [e for e in history if e.event_type == event_type]
        return list(reversed(history))[:limit]

    def get_statistics(self) -> EventBusStatistics:
        with self._lock:
            return EventBusStatistics(
                total_published=self._stats.total_published,
                total_processed=self._stats.total_processed,
                total_failed=self._stats.total_failed,
                subscriber_count={et: len(h) for et, h in self._subscribers.items()},
            )

    def clear(self) -> None:
        """Drop subscribers, history and statistics."""
        with self._lock:
            self._subscribers.clear()
            self._history.clear()
            self._stats = EventBusStatistics()


def _handler_name(handler: Callable) -> str:
    return getattr(handler, "__name__", repr(handler))


__all__ = [
    "ALL_EVENTS",
    "EventHandler",
    "Event",
    "PublishResult",
    "EventBusStatistics",
    "EventBus",
]
