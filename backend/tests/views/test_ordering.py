"""
Tests for propcore.views.ordering
"""
from propcore.views import newest_first, rank_table, sort_by_rank

PRIORITY = rank_table("urgent", "high", "medium", "low")


def _ids(records):
    return [r["id"] for r in records]


def test_rank_table():
    assert PRIORITY == {"urgent": 0, "high": 1, "medium": 2, "low": 3}


def test_sort_is_stable():
    records = [
        {"id": 1, "priority": "low"},
        {"id": 2, "priority": "urgent"},
        {"id": 3, "priority": "low"},
    ]
    assert _ids(sort_by_rank(records, "priority", PRIORITY)) == [2, 1, 3]


def test_unranked_values_go_last_in_input_order():
    records = [
        {"id": 1, "priority": "someday"},
        {"id": 2, "priority": "low"},
        {"id": 3, "priority": None},
        {"id": 4, "priority": "high"},
    ]
    assert _ids(sort_by_rank(records, "priority", PRIORITY)) == [4, 2, 1, 3]


def test_sort_returns_new_list():
    records = [{"id": 1, "priority": "low"}, {"id": 2, "priority": "urgent"}]
    result = sort_by_rank(records, "priority", PRIORITY)
    assert _ids(records) == [1, 2]
    assert result is not records


def test_newest_first():
    assert _ids(newest_first([{"id": 1}, {"id": 2}, {"id": 3}])) == [3, 2, 1]
