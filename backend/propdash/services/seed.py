"""
Demo data
Sample records shown by a fresh dashboard (enabled by SEED_DEMO_DATA)
"""
import logging
from datetime import date, datetime
from typing import Dict

logger = logging.getLogger(__name__)


ROOMS = [
    {"id": "1", "number": "101", "room_type": "Standard", "price": 15000, "capacity": 2, "floor": "1",
     "status": "available", "amenities": ["WiFi", "TV", "Air conditioning"]},
    {"id": "2", "number": "205", "room_type": "Suite", "price": 35000, "capacity": 4, "floor": "2",
     "status": "occupied", "amenities": ["WiFi", "TV", "Air conditioning", "Minibar", "Jacuzzi"]},
    {"id": "3", "number": "310", "room_type": "Deluxe", "price": 25000, "capacity": 3, "floor": "3",
     "status": "occupied", "amenities": ["WiFi", "TV", "Air conditioning", "Minibar"]},
    {"id": "4", "number": "102", "room_type": "Standard", "price": 15000, "capacity": 2, "floor": "1",
     "status": "cleaning", "amenities": ["WiFi", "TV", "Air conditioning"]},
]

RESERVATIONS = [
    {"id": "1", "client_name": "Jean Kouadio", "client_phone": "+225 07 12 34 56 78",
     "client_email": "jean.k@email.com", "room_number": "205",
     "check_in": date(2025, 10, 23), "check_out": date(2025, 10, 25), "guests": 2,
     "status": "confirmed", "total_price": 70000},
    {"id": "2", "client_name": "Marie Diallo", "client_phone": "+225 05 98 76 54 32",
     "room_number": "310", "check_in": date(2025, 10, 24), "check_out": date(2025, 10, 27), "guests": 3,
     "status": "checked-in", "total_price": 75000},
]

SERVICE_REQUESTS = [
    {"id": "1", "room_number": "205", "service_type": "room-service", "description": "Breakfast for 2",
     "priority": "medium", "status": "in-progress", "requested_at": datetime(2025, 10, 22, 8, 30)},
    {"id": "2", "room_number": "310", "service_type": "housekeeping", "description": "Extra cleaning",
     "priority": "low", "status": "pending", "requested_at": datetime(2025, 10, 22, 10, 15)},
    {"id": "3", "room_number": "102", "service_type": "maintenance", "description": "Air conditioning not working",
     "priority": "urgent", "status": "pending", "requested_at": datetime(2025, 10, 22, 9, 0)},
]

MENU_ITEMS = [
    {"id": "1", "name": "Poulet Braisé", "category": "main", "price": 2500,
     "description": "Grilled spiced chicken", "status": "available", "popularity": 23},
    {"id": "2", "name": "Attiéké Poisson", "category": "main", "price": 1800,
     "description": "Attiéké with fried fish", "status": "available", "popularity": 18},
    {"id": "3", "name": "Riz Sauce", "category": "main", "price": 1500,
     "description": "Rice with tomato sauce", "status": "available", "popularity": 15},
    {"id": "4", "name": "Pizza Royale", "category": "main", "price": 4500,
     "description": "Fully topped pizza", "status": "available", "popularity": 12},
    {"id": "5", "name": "Espresso", "category": "drink", "price": 500, "status": "available", "popularity": 30},
    {"id": "6", "name": "Fresh Orange Juice", "category": "drink", "price": 1000, "status": "available",
     "popularity": 25},
    {"id": "7", "name": "Local Beer", "category": "drink", "price": 800, "status": "available", "popularity": 20},
    {"id": "8", "name": "Tarte Tatin", "category": "dessert", "price": 1500, "status": "available", "popularity": 8},
    {"id": "9", "name": "Continental Breakfast", "category": "breakfast", "price": 3500,
     "description": "Bread, jam, coffee, juice", "status": "available", "popularity": 15},
]

ORDERS = [
    {"id": "1", "source": "table", "source_number": "5", "items": "Poulet braisé, Attiéké", "amount": 3500,
     "status": "preparing", "created_at": datetime(2025, 10, 23, 19, 15)},
    {"id": "2", "source": "room", "source_number": "204", "items": "Full breakfast", "amount": 5000,
     "status": "preparing", "created_at": datetime(2025, 10, 23, 19, 20)},
    {"id": "3", "source": "bar", "source_number": "Counter", "items": "3 Beers, Skewers", "amount": 4200,
     "status": "ready", "created_at": datetime(2025, 10, 23, 19, 25)},
    {"id": "4", "source": "table", "source_number": "2", "items": "Pizza, 2 Drinks", "amount": 6800,
     "status": "pending", "created_at": datetime(2025, 10, 23, 19, 10)},
    {"id": "5", "source": "room", "source_number": "105", "items": "Room service dinner", "amount": 8500,
     "status": "preparing", "created_at": datetime(2025, 10, 23, 19, 18)},
]

TABLES = [
    {"id": "1", "number": "1", "capacity": 4, "status": "free", "zone": "indoor"},
    {"id": "2", "number": "2", "capacity": 2, "status": "occupied", "zone": "indoor",
     "current_order": 6800, "occupied_since": datetime(2025, 10, 23, 18, 30)},
    {"id": "3", "number": "3", "capacity": 6, "status": "reserved", "zone": "indoor"},
    {"id": "4", "number": "4", "capacity": 4, "status": "free", "zone": "terrace"},
    {"id": "5", "number": "5", "capacity": 4, "status": "occupied", "zone": "terrace",
     "current_order": 3500, "occupied_since": datetime(2025, 10, 23, 19, 15)},
    {"id": "6", "number": "6", "capacity": 8, "status": "free", "zone": "vip"},
    {"id": "7", "number": "7", "capacity": 2, "status": "cleaning", "zone": "bar"},
    {"id": "8", "number": "8", "capacity": 4, "status": "free", "zone": "terrace"},
]

POOL_ACCESS = [
    {"id": 1, "name": "Jean Kouadio", "access_type": "subscriber", "start_date": date(2025, 10, 1),
     "end_date": date(2025, 12, 31), "party_size": 1, "status": "active",
     "entered_at": datetime(2025, 10, 23, 9, 30)},
    {"id": 2, "name": "Marie Boni", "access_type": "day-pass", "start_date": date(2025, 10, 23),
     "party_size": 2, "status": "active", "entered_at": datetime(2025, 10, 23, 14, 15)},
    {"id": 3, "name": "Aïcha Diallo - Room 205", "access_type": "hotel-guest", "start_date": date(2025, 10, 20),
     "end_date": date(2025, 10, 25), "party_size": 4, "status": "active",
     "entered_at": datetime(2025, 10, 23, 11, 0)},
    {"id": 4, "name": "Marc Boni", "access_type": "subscriber", "start_date": date(2025, 9, 1),
     "end_date": date(2025, 10, 31), "party_size": 1, "status": "expired"},
    {"id": 5, "name": "Sophie Koffi", "access_type": "guest", "start_date": date(2025, 10, 24),
     "party_size": 3, "status": "pending"},
]

MAINTENANCE_TASKS = [
    {"id": 1, "task_type": "cleaning", "description": "Daily cleaning - surface and filtration",
     "priority": "normal", "scheduled_date": date(2025, 10, 23), "assignee": "Kouassi Jean",
     "status": "completed", "created_at": datetime(2025, 10, 22),
     "completed_at": datetime(2025, 10, 23, 8, 30), "notes": "All fine"},
    {"id": 2, "task_type": "chemistry", "description": "pH and chlorine adjustment",
     "priority": "high", "scheduled_date": date(2025, 10, 23), "assignee": "Boni Marie",
     "status": "in-progress", "created_at": datetime(2025, 10, 23), "notes": "pH slightly high"},
    {"id": 3, "task_type": "equipment", "description": "Filtration pump check",
     "priority": "normal", "scheduled_date": date(2025, 10, 24), "assignee": "Diallo Aïcha",
     "status": "planned", "created_at": datetime(2025, 10, 22)},
    {"id": 4, "task_type": "repair", "description": "Chlorination system leak repair",
     "priority": "urgent", "scheduled_date": date(2025, 10, 23), "assignee": "Koffi Marc",
     "status": "in-progress", "created_at": datetime(2025, 10, 23), "notes": "Priority job - parts ordered"},
    {"id": 5, "task_type": "inspection", "description": "Full monthly inspection",
     "priority": "normal", "scheduled_date": date(2025, 10, 25), "assignee": "Kouassi Jean",
     "status": "planned", "created_at": datetime(2025, 10, 20)},
]

POOL_SERVICES = [
    {"id": 1, "service_type": "lounger", "client": "Jean Kouadio", "quantity": 2,
     "location": "Zone A - Loungers 12-13", "status": "active", "price": 5000,
     "requested_at": datetime(2025, 10, 23, 10, 30)},
    {"id": 2, "service_type": "towel", "client": "Marie Boni", "quantity": 3, "status": "active",
     "price": 1500, "requested_at": datetime(2025, 10, 23, 11, 15)},
    {"id": 3, "service_type": "cabana", "client": "Aïcha Diallo", "quantity": 1, "location": "VIP Cabana 5",
     "status": "active", "price": 15000, "notes": "All day", "requested_at": datetime(2025, 10, 23, 9, 0)},
    {"id": 4, "service_type": "drink", "client": "Marc Boni", "quantity": 2, "location": "Pool bar",
     "status": "active", "price": 4000, "notes": "Tropical cocktails",
     "requested_at": datetime(2025, 10, 23, 14, 30)},
    {"id": 5, "service_type": "lounger", "client": "Sophie Koffi", "quantity": 2,
     "location": "Zone B - Loungers 24-25", "status": "returned", "price": 5000,
     "requested_at": datetime(2025, 10, 23, 8, 30)},
]

# oldest first; the log shows the newest reading on top
CHEMISTRY_READINGS = [
    {"id": 1, "recorded_at": datetime(2025, 10, 21, 9, 0), "ph": 7.2, "chlorine": 1.5, "alkalinity": 120,
     "temperature": 27, "notes": "Nothing to report"},
    {"id": 2, "recorded_at": datetime(2025, 10, 22, 9, 0), "ph": 7.6, "chlorine": 1.2, "alkalinity": 130,
     "temperature": 27, "notes": "pH slightly high, corrector added"},
    {"id": 3, "recorded_at": datetime(2025, 10, 23, 9, 0), "ph": 7.4, "chlorine": 1.8, "alkalinity": 125,
     "temperature": 28, "notes": "Normal values"},
]

DEMO_DATA = {
    "room": ROOMS,
    "reservation": RESERVATIONS,
    "service_request": SERVICE_REQUESTS,
    "menu_item": MENU_ITEMS,
    "order": ORDERS,
    "table": TABLES,
    "pool_access": POOL_ACCESS,
    "maintenance": MAINTENANCE_TASKS,
    "pool_service": POOL_SERVICES,
}


def seed_demo_data(dashboard) -> Dict[str, int]:
    """
    Load the demo records into an empty dashboard

    Returns:
        kind -> number of records loaded
    """
    stats = {}
    for kind_name, records in DEMO_DATA.items():
        stats[kind_name] = dashboard.service(kind_name).load(records)
    stats["chemistry"] = dashboard.chemistry.load(CHEMISTRY_READINGS)
    logger.info(f"Demo data loaded: {stats}")
    return stats


__all__ = ["DEMO_DATA", "CHEMISTRY_READINGS", "seed_demo_data"]
