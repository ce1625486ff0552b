"""
propcore/views/ordering.py

Priority/Sort Order - fixed rank tables applied to one field.
"""
from typing import Any, Dict, Iterable, List, Sequence

from propcore.engine.fields import get_field

RankTable = Dict[str, int]


def rank_table(*values: str) -> RankTable:
    """Build a rank table from values listed highest priority first."""
    return {value: position for position, value in enumerate(values)}


def sort_by_rank(records: Iterable[Any], field_name: str, ranks: RankTable) -> List[Any]:
    """
    Stable sort by rank.

    Equal ranks keep their input order; values missing from ``ranks`` go
    after every ranked value, also in input order.

    Example:
        >>> rows = [{"id": 1, "priority": "low"}, {"id": 2, "priority": "urgent"},
        ...         {"id": 3, "priority": "low"}]
        >>> [r["id"] for r in sort_by_rank(rows, "priority", rank_table("urgent", "high", "medium", "low"))]
        [2, 1, 3]
    """
    def key(record: Any):
        value = get_field(record, field_name)
        value = getattr(value, "value", value)
        if value in ranks:
            return (0, ranks[value])
        return (1, 0)

    return sorted(records, key=key)


def newest_first(records: Sequence[Any]) -> List[Any]:
    """Reverse insertion order for kinds displayed newest-first."""
    return list(reversed(records))


__all__ = ["RankTable", "rank_table", "sort_by_rank", "newest_first"]
