"""
propdash/domain/hotel.py

Hotel module kinds: rooms, reservations, in-stay service requests.
"""
from datetime import datetime
from typing import Any, Dict

from propcore.engine import LifecycleConfig
from propcore.validation import (
    Required, MinLength, Text, Numeric, OneOf, DateValue, DateAfter, Email, CommaList,
)
from propcore.views import rank_table
from propdash.config import Settings
from propdash.domain.kinds import EntityKind
from propdash.models.enums import (
    RoomStatus, ReservationStatus, ServiceRequestStatus, HotelServiceType, RequestPriority, values_of,
)
from propdash.models.records import Room, Reservation, ServiceRequest


# ============== Rooms ==============

ROOM = EntityKind(
    name="room",
    label="Room",
    module="hotel",
    path="rooms",
    record_class=Room,
    lifecycle=LifecycleConfig(
        name="room",
        states=values_of(RoomStatus),
        initial_state=RoomStatus.AVAILABLE.value,
    ),
    rules=(
        Required("number", "Room number is required"),
        Required("room_type", "Room type is required"),
        Numeric("price", minimum=0),
        Numeric("capacity", minimum=1, integer=True),
        Required("floor", "Floor is required"),
        CommaList("amenities"),
    ),
    display_field="number",
    filter_fields={"status": values_of(RoomStatus), "room_type": None},
    search_fields=("number",),
    occupied_statuses=(RoomStatus.OCCUPIED.value,),
)


# ============== Reservations ==============

def reservation_total(values: Dict[str, Any], settings: Settings) -> Dict[str, Any]:
    """Total price = nights x nightly rate."""
    nights = (values["check_out"] - values["check_in"]).days
    return {"total_price": max(nights, 0) * settings.RESERVATION_NIGHTLY_RATE}


RESERVATION = EntityKind(
    name="reservation",
    label="Reservation",
    module="hotel",
    path="reservations",
    record_class=Reservation,
    lifecycle=LifecycleConfig(
        name="reservation",
        states=values_of(ReservationStatus),
        initial_state=ReservationStatus.PENDING.value,
    ),
    # dates first: a check-out on or before check-in is always the reported error
    rules=(
        DateValue("check_in", "Arrival date is required"),
        DateAfter("check_out", "check_in", message="Departure must be after arrival"),
        MinLength("client_name", 2, "Client name is required"),
        MinLength("client_phone", 8, "Phone number is required"),
        Email("client_email", optional=True),
        Required("room_number", "Room number is required"),
        Numeric("guests", minimum=1, integer=True),
        Text("special_requests"),
    ),
    display_field="client_name",
    filter_fields={"status": values_of(ReservationStatus)},
    search_fields=("client_name", "room_number"),
    derive=reservation_total,
)


# ============== Service requests ==============

SERVICE_REQUEST = EntityKind(
    name="service_request",
    label="Service request",
    module="hotel",
    path="services",
    record_class=ServiceRequest,
    lifecycle=LifecycleConfig(
        name="service_request",
        states=values_of(ServiceRequestStatus),
        initial_state=ServiceRequestStatus.PENDING.value,
        stamped_fields={ServiceRequestStatus.COMPLETED.value: "completed_at"},
    ),
    rules=(
        Required("room_number", "Room number is required"),
        OneOf("service_type", values_of(HotelServiceType)),
        MinLength("description", 5, "Description is required"),
        OneOf("priority", values_of(RequestPriority)),
    ),
    display_field="room_number",
    filter_fields={"service_type": values_of(HotelServiceType), "status": values_of(ServiceRequestStatus)},
    search_fields=("room_number", "description"),
    rank_field="priority",
    ranks=rank_table(*values_of(RequestPriority)),
    newest_first=True,
    on_create=lambda now: {"requested_at": now},
)


HOTEL_KINDS = (ROOM, RESERVATION, SERVICE_REQUEST)
