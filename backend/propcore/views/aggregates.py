"""
propcore/views/aggregates.py

Aggregate counts recomputed from the full store on every call.
"""
from typing import Any, Dict, Iterable, List, Optional, Sequence

from propcore.engine.fields import get_field


def _value(record: Any, field_name: str) -> Any:
    value = get_field(record, field_name)
    return getattr(value, "value", value)


def count_by(records: Iterable[Any], field_name: str, values: Optional[Sequence[str]] = None) -> Dict[str, int]:
    """
    Count records per field value.

    Args:
        records: Source records
        field_name: Field to group on
        values: Enumerated values to report, zero-filled, in this order

    Returns:
        value -> count
    """
    counts: Dict[str, int] = {v: 0 for v in values or ()}
    for record in records:
        key = _value(record, field_name)
        counts[key] = counts.get(key, 0) + 1
    return counts


def count_where(records: Iterable[Any], field_name: str, values: Iterable[str]) -> int:
    wanted = set(values)
    return sum(1 for record in records if _value(record, field_name) in wanted)


def ratio_summary(records: Sequence[Any], field_name: str, values: Iterable[str]) -> Dict[str, int]:
    """``{"count": n, "total": len(records)}`` for an "occupied/total" style counter."""
    return {"count": count_where(records, field_name, values), "total": len(records)}


def group_by(records: Iterable[Any], field_name: str, values: Sequence[str]) -> Dict[str, List[Any]]:
    """Split records into per-value lists, keeping record order inside each group."""
    groups: Dict[str, List[Any]] = {v: [] for v in values}
    for record in records:
        groups.setdefault(_value(record, field_name), []).append(record)
    return groups


__all__ = ["count_by", "count_where", "ratio_summary", "group_by"]
