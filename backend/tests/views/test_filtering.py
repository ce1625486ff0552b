"""
Tests for propcore.views.filtering
"""
import pytest
from enum import Enum

from propcore.views import FilterCriteria, apply_filters, check_no_sentinel_collision, is_sentinel


ORDERS = [
    {"id": "1", "status": "preparing", "source": "table", "source_number": "5", "items": "Poulet braisé, Attiéké"},
    {"id": "2", "status": "preparing", "source": "room", "source_number": "204", "items": "Full breakfast"},
    {"id": "3", "status": "ready", "source": "bar", "source_number": "Counter", "items": "3 Beers, Skewers"},
    {"id": "4", "status": "pending", "source": "table", "source_number": "2", "items": "Pizza, 2 Drinks"},
]


def _ids(records):
    return [r["id"] for r in records]


@pytest.mark.parametrize("value", ["all", "tous", "toutes", "ALL", None])
def test_sentinels(value):
    assert is_sentinel(value)


def test_regular_value_is_not_sentinel():
    assert not is_sentinel("available")


def test_all_sentinels_and_empty_search_return_input_unchanged():
    criteria = FilterCriteria(
        equals={"status": "tous", "source": "toutes"},
        search="",
        search_fields=("source_number", "items"),
    )
    result = apply_filters(ORDERS, criteria)
    assert result == ORDERS
    assert result is not ORDERS


def test_no_criteria_keeps_everything():
    assert _ids(apply_filters(ORDERS)) == ["1", "2", "3", "4"]


def test_equality_filters_combine_with_and():
    criteria = FilterCriteria(equals={"status": "preparing", "source": "table"})
    assert _ids(apply_filters(ORDERS, criteria)) == ["1"]


def test_search_is_case_insensitive_substring():
    criteria = FilterCriteria(search="PIZZA", search_fields=("source_number", "items"))
    assert _ids(apply_filters(ORDERS, criteria)) == ["4"]


def test_search_any_designated_field():
    criteria = FilterCriteria(search="20", search_fields=("source_number", "items"))
    assert _ids(apply_filters(ORDERS, criteria)) == ["2"]


def test_search_ignores_undesignated_fields():
    criteria = FilterCriteria(search="ready", search_fields=("items",))
    assert apply_filters(ORDERS, criteria) == []


def test_filter_and_search_combined():
    criteria = FilterCriteria(equals={"source": "table"}, search="pizza", search_fields=("items",))
    assert _ids(apply_filters(ORDERS, criteria)) == ["4"]


def test_search_matches_list_fields():
    rooms = [{"id": "1", "amenities": ["WiFi", "Jacuzzi"]}, {"id": "2", "amenities": ["TV"]}]
    criteria = FilterCriteria(search="jacuzzi", search_fields=("amenities",))
    assert _ids(apply_filters(rooms, criteria)) == ["1"]


def test_enum_values_compare_by_value():
    class Status(str, Enum):
        READY = "ready"

    records = [{"id": "1", "status": Status.READY}, {"id": "2", "status": "pending"}]
    criteria = FilterCriteria(equals={"status": "ready"})
    assert _ids(apply_filters(records, criteria)) == ["1"]


def test_source_not_mutated():
    before = list(ORDERS)
    apply_filters(ORDERS, FilterCriteria(equals={"status": "ready"}))
    assert ORDERS == before


def test_criteria_is_empty():
    assert FilterCriteria(equals={"status": "all"}).is_empty
    assert not FilterCriteria(search="x").is_empty


def test_sentinel_collision_rejected():
    with pytest.raises(ValueError):
        check_no_sentinel_collision(["available", "all"], "room status")
    check_no_sentinel_collision(["available", "occupied"])
