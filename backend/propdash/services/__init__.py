"""
propdash services
"""
from propdash.services.notification_service import NotificationService
from propdash.services.event_handlers import NotificationLogHandler
from propdash.services.entity_service import EntityService
from propdash.services.chemistry_service import ChemistryService, assess
from propdash.services.dashboard import Dashboard
from propdash.services.seed import seed_demo_data

__all__ = [
    "NotificationService",
    "NotificationLogHandler",
    "EntityService",
    "ChemistryService",
    "assess",
    "Dashboard",
    "seed_demo_data",
]
