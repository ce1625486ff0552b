"""
propdash/domain/restaurant.py

Restaurant module kinds: menu items, orders, dining tables.
"""
from typing import Any, Dict, List, Sequence

from propcore.engine import LifecycleConfig, get_field
from propcore.validation import Required, Text, Numeric, OneOf
from propdash.config import Settings
from propdash.domain.kinds import EntityKind
from propdash.models.enums import (
    MenuItemStatus, MenuCategory, OrderStatus, OrderSource, TableStatus, TableZone, values_of,
)
from propdash.models.records import MenuItem, Order, DiningTable


# ============== Menu ==============

MENU_ITEM = EntityKind(
    name="menu_item",
    label="Menu item",
    module="restaurant",
    path="menu",
    record_class=MenuItem,
    lifecycle=LifecycleConfig(
        name="menu_item",
        states=values_of(MenuItemStatus),
        initial_state=MenuItemStatus.AVAILABLE.value,
    ),
    rules=(
        Required("name", "Name is required"),
        OneOf("category", values_of(MenuCategory)),
        Numeric("price", minimum=0),
        Text("description"),
    ),
    display_field="name",
    filter_fields={"category": values_of(MenuCategory), "status": values_of(MenuItemStatus)},
    search_fields=("name", "description"),
    on_create=lambda now: {"popularity": 0},
)


def toggled_availability(status: str) -> str:
    """available <-> unavailable"""
    if status == MenuItemStatus.AVAILABLE.value:
        return MenuItemStatus.UNAVAILABLE.value
    return MenuItemStatus.AVAILABLE.value


# ============== Orders ==============

ACTIVE_ORDER_STATUSES = (
    OrderStatus.PENDING.value,
    OrderStatus.PREPARING.value,
    OrderStatus.READY.value,
)


def order_amount(values: Dict[str, Any], settings: Settings) -> Dict[str, Any]:
    return {"amount": values.get("amount") or 0}


ORDER = EntityKind(
    name="order",
    label="Order",
    module="restaurant",
    path="orders",
    record_class=Order,
    lifecycle=LifecycleConfig(
        name="order",
        states=values_of(OrderStatus),
        initial_state=OrderStatus.PENDING.value,
    ),
    rules=(
        OneOf("source", values_of(OrderSource)),
        Required("source_number", "Table, room or counter number is required"),
        Required("items", "Items are required"),
        Numeric("amount", minimum=0, optional=True),
        Text("special_instructions"),
    ),
    display_field="source_number",
    filter_fields={"status": values_of(OrderStatus), "source": values_of(OrderSource)},
    search_fields=("source_number", "items"),
    newest_first=True,
    derive=order_amount,
    on_create=lambda now: {"created_at": now},
)


def order_board(orders: Sequence[Any]) -> Dict[str, List[Any]]:
    """
    Split orders for the kitchen board.

    Returns:
        {"active": pending/preparing/ready, "served": served}; cancelled
        orders appear in neither group
    """
    board: Dict[str, List[Any]] = {"active": [], "served": []}
    for order in orders:
        status = get_field(order, "status")
        if status in ACTIVE_ORDER_STATUSES:
            board["active"].append(order)
        elif status == OrderStatus.SERVED.value:
            board["served"].append(order)
    return board


# ============== Tables ==============

TABLE = EntityKind(
    name="table",
    label="Table",
    module="restaurant",
    path="tables",
    record_class=DiningTable,
    lifecycle=LifecycleConfig(
        name="table",
        states=values_of(TableStatus),
        initial_state=TableStatus.FREE.value,
        stamped_fields={TableStatus.OCCUPIED.value: "occupied_since"},
        cleared_fields={TableStatus.FREE.value: ("current_order",)},
    ),
    rules=(
        Required("number", "Table number is required"),
        Numeric("capacity", minimum=1, integer=True),
        OneOf("zone", values_of(TableZone)),
        Numeric("current_order", minimum=0, optional=True),
    ),
    display_field="number",
    filter_fields={"zone": values_of(TableZone), "status": values_of(TableStatus)},
    search_fields=("number",),
    occupied_statuses=(TableStatus.OCCUPIED.value,),
)


RESTAURANT_KINDS = (MENU_ITEM, ORDER, TABLE)
