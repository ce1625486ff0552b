# Records and notification events
from propdash.models.records import (
    EntityRecord, Room, Reservation, ServiceRequest,
    MenuItem, Order, DiningTable,
    PoolAccess, MaintenanceTask, PoolService, ChemistryReading
)
from propdash.models.events import NotificationType, NotificationVariant, Notification

__all__ = [
    'EntityRecord', 'Room', 'Reservation', 'ServiceRequest',
    'MenuItem', 'Order', 'DiningTable',
    'PoolAccess', 'MaintenanceTask', 'PoolService', 'ChemistryReading',
    'NotificationType', 'NotificationVariant', 'Notification',
]
