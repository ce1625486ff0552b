"""
Entity records held in the stores

Records double as API response models. Enumerated fields are stored as
their plain string values; the enums in ``models.enums`` define the sets.
"""
from datetime import datetime, date
from typing import Optional, List, Union
from pydantic import BaseModel, Field, ConfigDict


class EntityRecord(BaseModel):
    """Common entity shape: immutable id plus a status"""
    id: Union[int, str]
    status: str

    # store updates go through setattr; keep them type-checked
    model_config = ConfigDict(validate_assignment=True)


# ============== Hotel ==============

class Room(EntityRecord):
    number: str
    room_type: str
    price: float = Field(..., ge=0)
    capacity: int = Field(..., ge=1)
    floor: str
    amenities: List[str] = Field(default_factory=list)


class Reservation(EntityRecord):
    client_name: str
    client_phone: str
    client_email: Optional[str] = None
    room_number: str
    check_in: date
    check_out: date
    guests: int = Field(..., ge=1)
    special_requests: Optional[str] = None
    total_price: float = 0


class ServiceRequest(EntityRecord):
    room_number: str
    service_type: str
    description: str
    priority: str
    requested_at: datetime
    completed_at: Optional[datetime] = None


# ============== Restaurant ==============

class MenuItem(EntityRecord):
    name: str
    category: str
    price: float = Field(..., ge=0)
    description: Optional[str] = None
    popularity: int = 0


class Order(EntityRecord):
    source: str
    source_number: str
    items: str
    amount: float = 0
    special_instructions: Optional[str] = None
    created_at: datetime


class DiningTable(EntityRecord):
    number: str
    capacity: int = Field(..., ge=1)
    zone: str
    current_order: Optional[float] = None
    occupied_since: Optional[datetime] = None


# ============== Pool ==============

class PoolAccess(EntityRecord):
    name: str
    access_type: str
    start_date: date
    end_date: Optional[date] = None
    party_size: int = Field(..., ge=1, le=10)
    entered_at: Optional[datetime] = None


class MaintenanceTask(EntityRecord):
    task_type: str
    description: str
    priority: str
    scheduled_date: date
    assignee: str
    notes: Optional[str] = None
    created_at: datetime
    completed_at: Optional[datetime] = None


class PoolService(EntityRecord):
    service_type: str
    client: str
    quantity: int = Field(..., ge=1)
    location: Optional[str] = None
    notes: Optional[str] = None
    price: float = 0
    requested_at: datetime


class ChemistryReading(BaseModel):
    """Water chemistry measurement"""
    id: int
    recorded_at: datetime
    ph: float
    chlorine: float
    alkalinity: float
    temperature: float
    notes: Optional[str] = None
