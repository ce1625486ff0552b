"""
propcore/views/filtering.py

Filter/Search View - derive the display subset of a store.

Equality criteria and the free-text search combine with AND. A criterion
set to a sentinel ("all", "tous", "toutes") or None applies no constraint.
"""
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple
from dataclasses import dataclass, field

from propcore.engine.fields import get_field

# Reserved "no constraint" values; never valid as a real field value
SENTINELS = frozenset({"all", "tous", "toutes"})


def is_sentinel(value: Any) -> bool:
    """True when ``value`` means "no constraint"."""
    if value is None:
        return True
    return isinstance(value, str) and value.strip().lower() in SENTINELS


def check_no_sentinel_collision(values: Iterable[Any], context: str = "") -> None:
    """
    Refuse enumerated values that would be read as a sentinel.

    Raises:
        ValueError: if any value collides with a sentinel
    """
    clashes = sorted(str(v) for v in values if isinstance(v, str) and v.strip().lower() in SENTINELS)
    if clashes:
        raise ValueError(f"{context or 'Enumerated'} values collide with filter sentinels: {clashes}")


@dataclass
class FilterCriteria:
    """
    Active criteria for one list view.

    Attributes:
        equals: field -> required value (sentinel / None = unconstrained)
        search: case-insensitive substring; empty matches everything
        search_fields: fields the search text is matched against
    """

    equals: Dict[str, Any] = field(default_factory=dict)
    search: str = ""
    search_fields: Tuple[str, ...] = ()

    @property
    def active_equals(self) -> Dict[str, Any]:
        return {k: v for k, v in self.equals.items() if not is_sentinel(v)}

    @property
    def is_empty(self) -> bool:
        return not self.active_equals and not (self.search or "").strip()


def _matches_equals(record: Any, criteria: Mapping[str, Any]) -> bool:
    for name, expected in criteria.items():
        if _normalize(get_field(record, name)) != _normalize(expected):
            return False
    return True


def _normalize(value: Any) -> Any:
    # str-valued enums compare by their value
    return getattr(value, "value", value)


def _matches_search(record: Any, text: str, search_fields: Sequence[str]) -> bool:
    needle = text.lower()
    for name in search_fields:
        value = get_field(record, name)
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            haystack = " ".join(str(v) for v in value)
        else:
            haystack = str(_normalize(value))
        if needle in haystack.lower():
            return True
    return False


def apply_filters(records: Iterable[Any], criteria: Optional[FilterCriteria] = None) -> List[Any]:
    """
    Compute the display subset.

    Args:
        records: Source sequence (not mutated)
        criteria: Active criteria; None keeps everything

    Returns:
        New list, source order preserved
    """
    items = list(records)
    if criteria is None:
        return items
    equals = criteria.active_equals
    text = (criteria.search or "").strip()
    result = []
    for record in items:
        if equals and not _matches_equals(record, equals):
            continue
        if text and not _matches_search(record, text, criteria.search_fields):
            continue
        result.append(record)
    return result


__all__ = [
    "SENTINELS",
    "is_sentinel",
    "check_no_sentinel_collision",
    "FilterCriteria",
    "apply_filters",
]
