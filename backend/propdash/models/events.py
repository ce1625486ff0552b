"""
Notification events
Published on the dashboard event bus after every mutation and every rejected form
"""
from enum import Enum
from dataclasses import dataclass, field, asdict
from datetime import datetime
from typing import Optional, Dict, Any, Union


class NotificationType(str, Enum):
    """Event type enum"""
    ENTITY_CREATED = "entity.created"
    ENTITY_UPDATED = "entity.updated"
    ENTITY_DELETED = "entity.deleted"
    STATUS_CHANGED = "entity.status_changed"

    VALIDATION_FAILED = "validation.failed"

    CHEMISTRY_RECORDED = "pool.chemistry_recorded"


class NotificationVariant(str, Enum):
    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


@dataclass
class Notification:
    """Notification payload (user-facing title + description)"""
    title: str
    description: str = ""
    variant: str = NotificationVariant.DEFAULT.value
    kind: Optional[str] = None
    entity_id: Optional[Union[int, str]] = None
    extra: Dict[str, Any] = field(default_factory=dict)
    # filled by NotificationService from its clock when left empty
    timestamp: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dict"""
        result = asdict(self)
        for key, value in result.items():
            if isinstance(value, datetime):
                result[key] = value.isoformat()
        return result


__all__ = ["NotificationType", "NotificationVariant", "Notification"]
