"""
Notification service
Publishes user-facing notifications on the dashboard event bus and reads them back
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from propcore.engine import Clock, Event, EventBus, PublishResult
from propcore.validation import ValidationError
from propdash.models.events import Notification, NotificationType, NotificationVariant

logger = logging.getLogger(__name__)


class NotificationService:
    """Notification boundary: title + description + variant per operation outcome"""

    def __init__(self, bus: EventBus, clock: Optional[Clock] = None):
        self.bus = bus
        self._clock = clock or datetime.now

    def notify(self, notification_type: NotificationType, notification: Notification,
               source: str = "propdash") -> PublishResult:
        if notification.timestamp is None:
            notification.timestamp = self._clock()
        event = Event(
            event_type=notification_type.value,
            timestamp=notification.timestamp,
            data=notification.to_dict(),
            source=source,
        )
        result = self.bus.publish(event)
        logger.debug(f"Notification {notification_type.value}: {notification.title}")
        return result

    def validation_failed(self, error: ValidationError, kind: Optional[str] = None) -> PublishResult:
        """Publish the destructive notification for a rejected form."""
        return self.notify(
            NotificationType.VALIDATION_FAILED,
            Notification(
                title="Validation error",
                description=error.message,
                variant=NotificationVariant.DESTRUCTIVE.value,
                kind=kind,
                extra={"field": error.field},
            ),
        )

    def recent(self, limit: int = 50, notification_type: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Recent notifications, newest first

        Args:
            limit: Maximum number returned
            notification_type: Only this type (e.g. "validation.failed")

        Returns:
            Flattened notification dicts carrying event_id / event_type
        """
        items = []
        for event in self.bus.get_history(event_type=notification_type, limit=limit):
            item = dict(event.data)
            item["event_id"] = event.event_id
            item["event_type"] = event.event_type
            item["timestamp"] = event.timestamp
            items.append(item)
        return items

    @property
    def total_published(self) -> int:
        return self.bus.get_statistics().total_published
