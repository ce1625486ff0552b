"""
Pool chemistry service
Water readings (pH, chlorine, alkalinity, temperature) with range assessment
"""
import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from propcore.engine import Clock, EntityStore, IdGenerator
from propcore.validation import Numeric, Text, ValidationError, validate
from propcore.views import newest_first
from propdash.models.events import Notification, NotificationType, NotificationVariant
from propdash.models.records import ChemistryReading
from propdash.services.notification_service import NotificationService

logger = logging.getLogger(__name__)

# Acceptable ranges (inclusive)
PH_RANGE: Tuple[float, float] = (7.2, 7.6)
CHLORINE_RANGE: Tuple[float, float] = (1.0, 3.0)      # ppm
ALKALINITY_RANGE: Tuple[float, float] = (80, 150)     # ppm

READING_RULES = (
    Numeric("ph", minimum=0, maximum=14),
    Numeric("chlorine", minimum=0),
    Numeric("alkalinity", minimum=0),
    Numeric("temperature", minimum=0, maximum=50),
    Text("notes"),
)


def _verdict(value: float, bounds: Tuple[float, float]) -> str:
    low, high = bounds
    return "ok" if low <= value <= high else "out_of_range"


def assess(reading: ChemistryReading) -> Dict[str, Any]:
    """
    Compare a reading with the acceptable ranges

    Returns:
        {"ph": ..., "chlorine": ..., "alkalinity": ..., "in_range": bool};
        each measure is "ok" or "out_of_range". Temperature is informational.
    """
    result: Dict[str, Any] = {
        "ph": _verdict(reading.ph, PH_RANGE),
        "chlorine": _verdict(reading.chlorine, CHLORINE_RANGE),
        "alkalinity": _verdict(reading.alkalinity, ALKALINITY_RANGE),
    }
    result["in_range"] = all(v == "ok" for v in result.values())
    return result


class ChemistryService:
    """Chemistry readings log (newest reading first)"""

    def __init__(self, notifications: NotificationService, clock: Optional[Clock] = None):
        self.notifications = notifications
        self._clock = clock or datetime.now
        self.store: EntityStore[ChemistryReading] = EntityStore("chemistry")
        self.ids = IdGenerator("counter")

    def record(self, data: Mapping[str, Any]) -> ChemistryReading:
        """
        Validate and log a reading

        Raises:
            ValidationError: first rejected measure; nothing is logged
        """
        try:
            cleaned = validate(data, READING_RULES)
        except ValidationError as e:
            logger.warning(f"[chemistry] rejected reading: {e.field}: {e.message}")
            self.notifications.validation_failed(e, kind="chemistry")
            raise

        reading = ChemistryReading(id=self.ids.next_id(), recorded_at=self._clock(), **cleaned)
        self.store.insert(reading)

        verdict = assess(reading)
        if verdict["in_range"]:
            description = "All values within range."
            variant = NotificationVariant.DEFAULT.value
        else:
            failing = [k for k, v in verdict.items() if v == "out_of_range"]
            description = f"Out of range: {', '.join(failing)}"
            variant = NotificationVariant.DESTRUCTIVE.value
            logger.warning(f"[chemistry] reading {reading.id} out of range: {failing}")

        self.notifications.notify(
            NotificationType.CHEMISTRY_RECORDED,
            Notification(
                title="Chemistry reading recorded",
                description=description,
                variant=variant,
                kind="chemistry",
                entity_id=reading.id,
            ),
            source="chemistry",
        )
        return reading

    def history(self, limit: Optional[int] = None) -> List[ChemistryReading]:
        readings = newest_first(self.store.find_all())
        return readings[:limit] if limit is not None else readings

    def latest(self) -> Optional[ChemistryReading]:
        readings = self.history(limit=1)
        return readings[0] if readings else None

    def load(self, readings: Iterable[Union[Mapping[str, Any], ChemistryReading]]) -> int:
        """Insert readings oldest first (demo data)."""
        count = 0
        for raw in readings:
            reading = raw if isinstance(raw, ChemistryReading) else ChemistryReading(**raw)
            self.ids.observe(reading.id)
            self.store.insert(reading)
            count += 1
        return count


__all__ = [
    "PH_RANGE",
    "CHLORINE_RANGE",
    "ALKALINITY_RANGE",
    "READING_RULES",
    "assess",
    "ChemistryService",
]
