"""
Event handlers
Subscribers on the dashboard event bus
"""
import logging

from propcore.engine import ALL_EVENTS, Event, EventBus
from propdash.models.events import NotificationVariant

logger = logging.getLogger(__name__)


class NotificationLogHandler:
    """
    Writes every notification to the application log

    Destructive notifications (rejected forms, deletions, out-of-range
    chemistry) are logged at WARNING, the rest at INFO.
    """

    def __init__(self, log: logging.Logger = logger):
        self._log = log
        self._registered = False

    def handle(self, event: Event) -> None:
        data = event.data
        level = logging.WARNING if data.get("variant") == NotificationVariant.DESTRUCTIVE.value else logging.INFO
        self._log.log(level, f"[{event.source}] {event.event_type}: {data.get('title')} {data.get('description', '')}".rstrip())

    def register_handlers(self, bus: EventBus) -> None:
        if self._registered:
            return
        bus.subscribe(ALL_EVENTS, self.handle)
        self._registered = True
        logger.debug("Notification log handler registered")

    def unregister_handlers(self, bus: EventBus) -> None:
        bus.unsubscribe(ALL_EVENTS, self.handle)
        self._registered = False


__all__ = ["NotificationLogHandler"]
