"""
Tests for propdash.services.entity_service
"""
import pytest
from datetime import datetime

from propcore.validation import Numeric, Required, ValidationError
from propdash.domain import EntityKind
from propdash.domain.hotel import ROOM
from propdash.models.records import Room
from propdash.services.entity_service import EntityService


@pytest.fixture
def rooms(dashboard):
    return dashboard.service("room")


# ============== Create ==============

class TestCreate:
    """Creation"""

    def test_create_room(self, rooms, room_form):
        room = rooms.create(room_form)
        assert room.status == "available"
        assert room.price == 15000
        assert room.capacity == 2
        assert room.amenities == ["WiFi", "TV", "Air conditioning"]
        assert rooms.get(room.id) is room

    def test_invalid_form_leaves_store_unchanged(self, rooms, room_form):
        room_form["capacity"] = "0"
        with pytest.raises(ValidationError) as exc:
            rooms.create(room_form)
        assert exc.value.field == "capacity"
        assert len(rooms.store) == 0

    def test_invalid_form_publishes_destructive_notification(self, dashboard, rooms, room_form):
        room_form["number"] = ""
        with pytest.raises(ValidationError):
            rooms.create(room_form)
        latest = dashboard.notifications.recent(limit=1)[0]
        assert latest["event_type"] == "validation.failed"
        assert latest["variant"] == "destructive"
        assert latest["extra"] == {"field": "number"}

    def test_create_publishes_notification(self, dashboard, rooms, room_form):
        room = rooms.create(room_form)
        latest = dashboard.notifications.recent(limit=1)[0]
        assert latest["event_type"] == "entity.created"
        assert latest["title"] == "Room created"
        assert latest["entity_id"] == room.id

    def test_ids_unique(self, rooms, room_form):
        ids = {rooms.create(room_form).id for _ in range(5)}
        assert len(ids) == 5

    def test_reservation_total_price(self, dashboard, reservation_form):
        reservation = dashboard.service("reservation").create(reservation_form)
        assert reservation.status == "pending"
        assert reservation.total_price == 2 * 25000

    def test_service_request_stamps(self, dashboard, service_request_form, clock):
        request = dashboard.service("service_request").create(service_request_form)
        assert request.requested_at == datetime(2025, 10, 23, 9, 0)
        assert request.completed_at is None

    def test_menu_item_popularity_starts_at_zero(self, dashboard):
        item = dashboard.service("menu_item").create({"name": "Alloco", "category": "main", "price": "1200"})
        assert item.popularity == 0
        assert item.status == "available"

    def test_order_amount_defaults_to_zero(self, dashboard):
        order = dashboard.service("order").create({"source": "bar", "source_number": "Counter", "items": "2 Beers"})
        assert order.amount == 0
        assert order.created_at is not None

    def test_pool_counter_ids(self, dashboard):
        access = dashboard.service("pool_access")
        form = {"name": "Sophie Koffi", "access_type": "guest", "start_date": "2025-10-24", "party_size": "3"}
        first = access.create(form)
        second = access.create(form)
        assert (first.id, second.id) == (1, 2)

    def test_pool_counter_ids_not_reused_after_delete(self, dashboard):
        access = dashboard.service("pool_access")
        form = {"name": "Sophie Koffi", "access_type": "guest", "start_date": "2025-10-24", "party_size": "3"}
        access.create(form)
        second = access.create(form)
        access.delete(second.id)
        assert access.create(form).id == 3

    def test_party_size_limit(self, dashboard):
        form = {"name": "Big group", "access_type": "guest", "start_date": "2025-10-24", "party_size": "11"}
        with pytest.raises(ValidationError) as exc:
            dashboard.service("pool_access").create(form)
        assert exc.value.field == "party_size"

    def test_pool_service_price(self, dashboard):
        service = dashboard.service("pool_service").create(
            {"service_type": "towel", "client": "Marie Boni", "quantity": "3"}
        )
        assert service.price == 1500
        assert service.status == "active"


# ============== Edit / delete ==============

class TestEditDelete:
    """Edit and delete"""

    def test_edit_replaces_form_fields(self, rooms, room_form):
        room = rooms.create(room_form)
        room_form["price"] = "18000"
        room_form["amenities"] = "WiFi"
        updated = rooms.edit(room.id, room_form)
        assert updated.price == 18000
        assert updated.amenities == ["WiFi"]
        assert updated.id == room.id

    def test_edit_unknown_id(self, rooms, room_form):
        assert rooms.edit("missing", room_form) is None

    def test_edit_invalid_form_leaves_record(self, rooms, room_form):
        room = rooms.create(room_form)
        room_form["price"] = "-5"
        with pytest.raises(ValidationError):
            rooms.edit(room.id, room_form)
        assert rooms.get(room.id).price == 15000

    def test_edit_recomputes_derived_fields(self, dashboard):
        services = dashboard.service("pool_service")
        service = services.create({"service_type": "lounger", "client": "Jean Kouadio", "quantity": "1"})
        services.edit(service.id, {"service_type": "lounger", "client": "Jean Kouadio", "quantity": "3"})
        assert service.price == 7500

    def test_edit_with_status_goes_through_lifecycle(self, dashboard, maintenance_form):
        tasks = dashboard.service("maintenance")
        task = tasks.create(maintenance_form)
        tasks.edit(task.id, {**maintenance_form, "status": "completed"})
        assert task.status == "completed"
        assert task.completed_at is not None

    def test_edit_with_invalid_status(self, dashboard, maintenance_form):
        tasks = dashboard.service("maintenance")
        task = tasks.create(maintenance_form)
        with pytest.raises(ValidationError) as exc:
            tasks.edit(task.id, {**maintenance_form, "status": "done"})
        assert exc.value.field == "status"

    def test_delete_twice(self, rooms, room_form):
        room = rooms.create(room_form)
        assert rooms.delete(room.id) is True
        assert rooms.delete(room.id) is False
        assert len(rooms.store) == 0


# ============== Status ==============

class TestChangeStatus:
    """Status lifecycle through the service"""

    def test_room_101_scenario(self, rooms, room_form):
        room = rooms.create(room_form)
        rooms.change_status(room.id, "occupied")

        assert room not in rooms.list_view({"status": "available"})
        assert room in rooms.list_view({"status": "occupied"})

    def test_completed_request_stamped_then_cleared(self, dashboard, service_request_form):
        requests = dashboard.service("service_request")
        request = requests.create(service_request_form)

        requests.change_status(request.id, "completed")
        assert request.completed_at is not None

        requests.change_status(request.id, "in-progress")
        assert request.completed_at is None

    def test_table_free_clears_current_order(self, dashboard, table_form):
        tables = dashboard.service("table")
        table = tables.create(table_form)
        tables.change_status(table.id, "occupied")
        table.current_order = 6800
        assert table.occupied_since is not None

        tables.change_status(table.id, "free")
        assert table.current_order is None
        assert table.occupied_since is None

    def test_invalid_status(self, rooms, room_form):
        room = rooms.create(room_form)
        with pytest.raises(ValidationError) as exc:
            rooms.change_status(room.id, "all")
        assert exc.value.field == "status"
        assert room.status == "available"

    def test_unknown_id(self, rooms):
        assert rooms.change_status("missing", "occupied") is None

    def test_status_notification(self, dashboard, rooms, room_form):
        room = rooms.create(room_form)
        rooms.change_status(room.id, "cleaning")
        latest = dashboard.notifications.recent(limit=1)[0]
        assert latest["event_type"] == "entity.status_changed"
        assert latest["extra"] == {"previous": "available", "status": "cleaning"}


# ============== Views ==============

class TestListView:
    """Filtering, search and ordering"""

    def test_sentinels_return_storage_order(self, rooms, room_form):
        created = []
        for number in ("101", "205", "310"):
            created.append(rooms.create({**room_form, "number": number}))
        assert rooms.list_view({"status": "all", "room_type": "tous"}, "") == created

    def test_search_by_number(self, rooms, room_form):
        rooms.create({**room_form, "number": "101"})
        rooms.create({**room_form, "number": "205"})
        assert [r.number for r in rooms.list_view(search="20")] == ["205"]

    def test_undeclared_filter_ignored(self, rooms, room_form):
        rooms.create(room_form)
        assert len(rooms.list_view({"price": "1"})) == 1

    def test_service_requests_by_priority_then_newest(self, dashboard, service_request_form):
        requests = dashboard.service("service_request")
        low_old = requests.create({**service_request_form, "priority": "low"})
        urgent = requests.create({**service_request_form, "priority": "urgent"})
        low_new = requests.create({**service_request_form, "priority": "low"})
        assert [r.id for r in requests.list_view()] == [urgent.id, low_new.id, low_old.id]

    def test_orders_newest_first(self, dashboard):
        orders = dashboard.service("order")
        first = orders.create({"source": "table", "source_number": "5", "items": "Attiéké"})
        second = orders.create({"source": "room", "source_number": "204", "items": "Breakfast"})
        assert orders.list_view() == [second, first]
        assert orders.store.find_all() == (first, second)

    def test_grouped(self, dashboard, table_form):
        tables = dashboard.service("table")
        tables.create(table_form)
        groups = tables.grouped("zone")
        assert set(groups) == {"indoor", "terrace", "bar", "vip"}
        assert len(groups["terrace"]) == 1

    def test_summary(self, dashboard, table_form):
        tables = dashboard.service("table")
        first = tables.create(table_form)
        tables.create({**table_form, "zone": "vip"})
        tables.change_status(first.id, "occupied")

        summary = tables.summary()
        assert summary["total"] == 2
        assert summary["by_status"] == {"free": 1, "occupied": 1, "reserved": 0, "cleaning": 0}
        assert summary["breakdowns"]["zone"]["vip"] == 1
        assert summary["occupancy"] == {"count": 1, "total": 2}

    def test_summary_without_occupancy(self, dashboard):
        assert dashboard.service("order").summary()["occupancy"] is None


def test_parse_id(dashboard):
    assert dashboard.service("pool_access").parse_id("3") == 3
    assert dashboard.service("room").parse_id("3") == "3"


# ============== Rejected input leaves the store intact ==============

@pytest.fixture
def loose_rooms(dashboard):
    """Room service whose form rules let a non-integer capacity through to the model"""
    kind = EntityKind(
        name="loose_room",
        label="Room",
        module="test",
        path="loose-rooms",
        record_class=Room,
        lifecycle=ROOM.lifecycle,
        rules=(Required("number"), Required("room_type"), Numeric("price"), Required("capacity"), Required("floor")),
        display_field="number",
    )
    return EntityService(kind, dashboard.notifications, dashboard.settings)


class TestRejectedInput:
    """Non-text JSON values and model-level rejections"""

    def test_numbers_in_text_fields_read_as_text(self, dashboard, room_form, reservation_form):
        room = dashboard.service("room").create({**room_form, "floor": 1})
        assert room.floor == "1"

        reservation = dashboard.service("reservation").create({**reservation_form, "room_number": 205})
        assert reservation.room_number == "205"

    def test_list_in_text_field_rejected(self, dashboard, rooms, room_form):
        with pytest.raises(ValidationError) as exc:
            rooms.create({**room_form, "floor": [1]})
        assert exc.value.field == "floor"
        assert len(rooms.store) == 0
        assert dashboard.notifications.recent(limit=1)[0]["event_type"] == "validation.failed"

    def test_model_rejection_on_create(self, dashboard, loose_rooms, room_form):
        with pytest.raises(ValidationError) as exc:
            loose_rooms.create({**room_form, "capacity": "many"})
        assert exc.value.field == "capacity"
        assert len(loose_rooms.store) == 0

        latest = dashboard.notifications.recent(limit=1)[0]
        assert latest["event_type"] == "validation.failed"
        assert latest["extra"] == {"field": "capacity"}

    def test_model_rejection_on_edit_leaves_record_unchanged(self, dashboard, loose_rooms, room_form):
        room = loose_rooms.create(room_form)
        before = room.model_dump()

        with pytest.raises(ValidationError) as exc:
            loose_rooms.edit(room.id, {**room_form, "number": "999", "capacity": "many"})
        assert exc.value.field == "capacity"
        assert loose_rooms.get(room.id).model_dump() == before
        assert dashboard.notifications.recent(limit=1)[0]["event_type"] == "validation.failed"

    def test_rejected_edit_leaves_record_unchanged(self, dashboard, reservation_form):
        reservations = dashboard.service("reservation")
        reservation = reservations.create(reservation_form)
        before = reservation.model_dump()

        with pytest.raises(ValidationError):
            reservations.edit(reservation.id, {**reservation_form, "client_name": "CHANGED NAME", "guests": "0"})
        assert reservations.get(reservation.id).model_dump() == before
        assert [n["event_type"] for n in dashboard.notifications.recent()] == ["validation.failed", "entity.created"]


def test_notifications_use_injected_clock(dashboard, rooms, room_form):
    rooms.create(room_form)
    assert dashboard.notifications.recent(limit=1)[0]["timestamp"] == datetime(2025, 10, 23, 9, 0)
