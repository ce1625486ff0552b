"""
Dashboard container
Owns the event bus, one EntityService per kind and the chemistry log.
One instance per application; tests build their own.
"""
import logging
from typing import Any, Dict, Optional

from propcore.engine import Clock, EventBus
from propdash.config import Settings, settings as default_settings
from propdash.domain import KindRegistry, build_registry
from propdash.services.chemistry_service import ChemistryService
from propdash.services.entity_service import EntityService
from propdash.services.event_handlers import NotificationLogHandler
from propdash.services.notification_service import NotificationService

logger = logging.getLogger(__name__)


class Dashboard:
    """
    Example:
        >>> dashboard = Dashboard()
        >>> dashboard.service("room").list_view({"status": "all"})
        []
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        clock: Optional[Clock] = None,
        registry: Optional[KindRegistry] = None,
    ):
        self.settings = settings or default_settings
        self.bus = EventBus(history_size=self.settings.NOTIFICATION_HISTORY_SIZE)
        self.notifications = NotificationService(self.bus, clock)
        self.log_handler = NotificationLogHandler()
        self.log_handler.register_handlers(self.bus)
        self.kinds = registry or build_registry()
        self.services: Dict[str, EntityService] = {
            kind.name: EntityService(kind, self.notifications, self.settings, clock)
            for kind in self.kinds
        }
        self.chemistry = ChemistryService(self.notifications, clock)
        logger.info(f"Dashboard ready with {len(self.services)} entity kinds")

    def service(self, kind_name: str) -> EntityService:
        """
        Raises:
            KeyError: unknown kind
        """
        try:
            return self.services[kind_name]
        except KeyError:
            raise KeyError(f"Unknown entity kind '{kind_name}'") from None

    def summary(self) -> Dict[str, Dict[str, Any]]:
        """Per-module, per-kind aggregate counts plus the latest chemistry reading."""
        result: Dict[str, Dict[str, Any]] = {}
        for module in self.kinds.modules():
            result[module] = {
                kind.name: self.services[kind.name].summary()
                for kind in self.kinds.by_module(module)
            }
        latest = self.chemistry.latest()
        result.setdefault("pool", {})["chemistry"] = latest.model_dump(mode="json") if latest else None
        return result

    def store_sizes(self) -> Dict[str, int]:
        sizes = {name: len(service.store) for name, service in self.services.items()}
        sizes["chemistry"] = len(self.chemistry.store)
        return sizes


__all__ = ["Dashboard"]
