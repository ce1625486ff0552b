"""
Enumerated values per entity kind

Member order matters for statuses: the first member is the initial status.
"""
from enum import Enum
from typing import List, Type


def values_of(enum_cls: Type[Enum]) -> List[str]:
    return [member.value for member in enum_cls]


# ============== Hotel ==============

class RoomStatus(str, Enum):
    AVAILABLE = "available"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"
    CLEANING = "cleaning"


class ReservationStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CHECKED_IN = "checked-in"
    CHECKED_OUT = "checked-out"
    CANCELLED = "cancelled"


class ServiceRequestStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class HotelServiceType(str, Enum):
    ROOM_SERVICE = "room-service"
    HOUSEKEEPING = "housekeeping"
    LAUNDRY = "laundry"
    MAINTENANCE = "maintenance"
    CONCIERGE = "concierge"


class RequestPriority(str, Enum):
    """Listed highest first"""
    URGENT = "urgent"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# ============== Restaurant ==============

class MenuItemStatus(str, Enum):
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"


class MenuCategory(str, Enum):
    MAIN = "main"
    DRINK = "drink"
    DESSERT = "dessert"
    BREAKFAST = "breakfast"


class OrderStatus(str, Enum):
    PENDING = "pending"
    PREPARING = "preparing"
    READY = "ready"
    SERVED = "served"
    CANCELLED = "cancelled"


class OrderSource(str, Enum):
    TABLE = "table"
    ROOM = "room"
    BAR = "bar"


class TableStatus(str, Enum):
    FREE = "free"
    OCCUPIED = "occupied"
    RESERVED = "reserved"
    CLEANING = "cleaning"


class TableZone(str, Enum):
    INDOOR = "indoor"
    TERRACE = "terrace"
    BAR = "bar"
    VIP = "vip"


# ============== Pool ==============

class PoolAccessStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    EXPIRED = "expired"


class AccessType(str, Enum):
    SUBSCRIBER = "subscriber"
    DAY_PASS = "day-pass"
    HOTEL_GUEST = "hotel-guest"
    GUEST = "guest"


class MaintenanceStatus(str, Enum):
    PLANNED = "planned"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    POSTPONED = "postponed"


class MaintenanceType(str, Enum):
    CLEANING = "cleaning"
    CHEMISTRY = "chemistry"
    EQUIPMENT = "equipment"
    REPAIR = "repair"
    INSPECTION = "inspection"


class MaintenancePriority(str, Enum):
    """Listed highest first"""
    URGENT = "urgent"
    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"


class PoolServiceStatus(str, Enum):
    ACTIVE = "active"
    RETURNED = "returned"
    CANCELLED = "cancelled"


class PoolServiceType(str, Enum):
    LOUNGER = "lounger"
    TOWEL = "towel"
    CABANA = "cabana"
    DRINK = "drink"
    SNACK = "snack"
    PARASOL = "parasol"
