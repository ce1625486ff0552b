"""
Tests for propdash.domain
"""
import pytest

from propcore.engine import LifecycleConfig
from propdash.config import Settings
from propdash.domain import ALL_KINDS, EntityKind, KindRegistry, build_registry
from propdash.domain.hotel import ROOM, reservation_total
from propdash.domain.pool import service_price
from propdash.domain.restaurant import order_board, toggled_availability
from propdash.models.records import Room
from datetime import date


def test_registry_holds_every_kind():
    registry = build_registry()
    assert len(registry) == 9
    assert registry.modules() == ["hotel", "restaurant", "pool"]
    assert [k.name for k in registry.by_module("pool")] == ["pool_access", "maintenance", "pool_service"]
    assert registry.get("table").prefix == "/restaurant/tables"
    assert registry.get("unknown") is None


def test_registry_rejects_duplicate():
    registry = KindRegistry()
    registry.register(ROOM)
    with pytest.raises(ValueError):
        registry.register(ROOM)


def test_prefixes_are_unique():
    prefixes = [kind.prefix for kind in ALL_KINDS]
    assert len(prefixes) == len(set(prefixes))


@pytest.mark.parametrize("kind", ALL_KINDS, ids=lambda k: k.name)
def test_initial_status_is_first_status(kind):
    assert kind.lifecycle.initial_state == kind.statuses[0]


def test_status_colliding_with_sentinel_rejected():
    with pytest.raises(ValueError):
        EntityKind(
            name="bad",
            label="Bad",
            module="test",
            path="bad",
            record_class=Room,
            lifecycle=LifecycleConfig(name="bad", states=["all", "some"], initial_state="all"),
            rules=(),
            display_field="number",
        )


def test_filter_value_colliding_with_sentinel_rejected():
    with pytest.raises(ValueError):
        EntityKind(
            name="bad",
            label="Bad",
            module="test",
            path="bad",
            record_class=Room,
            lifecycle=LifecycleConfig(name="bad", states=["available"], initial_state="available"),
            rules=(),
            display_field="number",
            filter_fields={"room_type": ["Suite", "Tous"]},
        )


def test_unknown_record_field_rejected():
    with pytest.raises(ValueError):
        EntityKind(
            name="bad",
            label="Bad",
            module="test",
            path="bad",
            record_class=Room,
            lifecycle=LifecycleConfig(name="bad", states=["available"], initial_state="available"),
            rules=(),
            display_field="number",
            search_fields=("nonexistent",),
        )


def test_describe():
    assert ROOM.describe({"number": "101"}) == "Room 101"


def test_reservation_total():
    settings = Settings(RESERVATION_NIGHTLY_RATE=25000)
    values = {"check_in": date(2025, 10, 24), "check_out": date(2025, 10, 27)}
    assert reservation_total(values, settings) == {"total_price": 75000}


def test_service_price():
    settings = Settings()
    assert service_price({"service_type": "cabana", "quantity": 1}, settings) == {"price": 15000}
    assert service_price({"service_type": "lounger", "quantity": 2}, settings) == {"price": 5000}


def test_toggle_availability():
    assert toggled_availability("available") == "unavailable"
    assert toggled_availability("unavailable") == "available"


def test_order_board():
    orders = [
        {"id": "1", "status": "pending"},
        {"id": "2", "status": "served"},
        {"id": "3", "status": "ready"},
        {"id": "4", "status": "cancelled"},
    ]
    board = order_board(orders)
    assert [o["id"] for o in board["active"]] == ["1", "3"]
    assert [o["id"] for o in board["served"]] == ["2"]
