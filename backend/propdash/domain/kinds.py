"""
propdash/domain/kinds.py

Entity kind descriptors.

Every module (rooms, orders, pool services, ...) is the same generic
machinery parameterised by one ``EntityKind``: its record type, status
lifecycle, form rules, filter and search fields, rank table and the
derived fields computed from validated input.
"""
from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple, Type
from dataclasses import dataclass, field
from datetime import datetime
import logging

from propcore.engine import LifecycleConfig, get_field
from propcore.validation import FieldRule
from propcore.views import RankTable, check_no_sentinel_collision
from propdash.config import Settings
from propdash.models.records import EntityRecord

logger = logging.getLogger(__name__)

# validated form values + settings -> derived fields (on create and edit)
DeriveHook = Callable[[Dict[str, Any], Settings], Dict[str, Any]]
# creation time -> fields set once at creation
CreateHook = Callable[[datetime], Dict[str, Any]]


@dataclass
class EntityKind:
    """
    Descriptor for one entity kind.

    Attributes:
        name: Kind identifier ("room", "order", ...)
        label: Display label used in notifications
        module: Owning module ("hotel", "restaurant", "pool")
        path: URL segment under the module prefix
        record_class: Record model stored for this kind
        lifecycle: Status set and transition side effects
        rules: Ordered form rules (create and full edit)
        display_field: Field naming a record in notifications
        filter_fields: field -> enumerated values (None for free-form fields)
        search_fields: Fields matched by the free-text search
        rank_field / ranks: Priority sort applied to list views
        id_strategy: "counter" or "timestamp"
        newest_first: List views show the latest insert first
        occupied_statuses: Statuses counted by the occupied/total summary
        derive: Derived fields recomputed from validated values
        on_create: Fields set once when a record is created
    """

    name: str
    label: str
    module: str
    path: str
    record_class: Type[EntityRecord]
    lifecycle: LifecycleConfig
    rules: Tuple[FieldRule, ...]
    display_field: str
    filter_fields: Dict[str, Optional[Sequence[str]]] = field(default_factory=dict)
    search_fields: Tuple[str, ...] = ()
    rank_field: Optional[str] = None
    ranks: Optional[RankTable] = None
    id_strategy: str = "timestamp"
    newest_first: bool = False
    occupied_statuses: Tuple[str, ...] = ()
    derive: Optional[DeriveHook] = None
    on_create: Optional[CreateHook] = None

    def __post_init__(self) -> None:
        check_no_sentinel_collision(self.lifecycle.states, f"{self.name} status")
        for field_name, values in self.filter_fields.items():
            if values:
                check_no_sentinel_collision(values, f"{self.name}.{field_name}")

        known = set(self.record_class.model_fields)
        referenced = [self.display_field, *self.filter_fields, *self.search_fields, *(r.field for r in self.rules)]
        if self.rank_field:
            referenced.append(self.rank_field)
        missing = [f for f in referenced if f not in known]
        if missing:
            raise ValueError(f"{self.name}: unknown record fields {missing}")
        if (self.rank_field is None) != (self.ranks is None):
            raise ValueError(f"{self.name}: rank_field and ranks go together")

    @property
    def prefix(self) -> str:
        return f"/{self.module}/{self.path}"

    @property
    def statuses(self) -> List[str]:
        return list(self.lifecycle.states)

    @property
    def enumerated_filters(self) -> Dict[str, Sequence[str]]:
        return {k: v for k, v in self.filter_fields.items() if v}

    def describe(self, record: Any) -> str:
        """Short human label, e.g. "Room 101"."""
        return f"{self.label} {get_field(record, self.display_field)}"


class KindRegistry:
    """
    Registry of entity kinds

    Example:
        >>> kinds = KindRegistry()
        >>> kinds.register(ROOM)
        >>> kinds.get("room").prefix
        '/hotel/rooms'
    """

    def __init__(self):
        self._kinds: Dict[str, EntityKind] = {}

    def register(self, kind: EntityKind) -> None:
        if kind.name in self._kinds:
            raise ValueError(f"Entity kind '{kind.name}' is already registered")
        self._kinds[kind.name] = kind
        logger.info(f"EntityKind registered: {kind.name} ({kind.prefix})")

    def get(self, name: str) -> Optional[EntityKind]:
        return self._kinds.get(name)

    def get_all(self) -> Dict[str, EntityKind]:
        return self._kinds.copy()

    def by_module(self, module: str) -> List[EntityKind]:
        return [k for k in self._kinds.values() if k.module == module]

    def modules(self) -> List[str]:
        """Module names in registration order"""
        return list(dict.fromkeys(k.module for k in self._kinds.values()))

    def clear(self) -> None:
        """Remove every kind (for tests)"""
        self._kinds.clear()

    def __iter__(self) -> Iterator[EntityKind]:
        return iter(list(self._kinds.values()))

    def __len__(self) -> int:
        return len(self._kinds)


__all__ = ["DeriveHook", "CreateHook", "EntityKind", "KindRegistry"]
