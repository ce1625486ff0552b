"""
propcore/engine/store.py

Entity Store - ordered in-memory collection of one entity kind.

The store is the single authoritative list for a kind. Storage order is
insertion order; views derive filtered / sorted copies and never reorder it.
"""
from typing import Any, Dict, Generic, Iterator, List, Optional, Sequence, TypeVar, Union
import itertools
import logging
import time

from propcore.engine.fields import get_field, get_id, set_field

logger = logging.getLogger(__name__)

T = TypeVar("T")
EntityId = Union[int, str]


class IdCollisionError(RuntimeError):
    """Raised when an inserted record reuses an id already in the store.

    Id generation makes this impossible in normal operation, so reaching it
    means an invariant was broken upstream.
    """


# ============== Id generation ==============

class IdGenerator:
    """
    Monotonic id source.

    Strategies:
        counter:   1, 2, 3 ... (ints); never reused, even after deletes
        timestamp: millisecond timestamp strings, strictly increasing

    Example:
        >>> ids = IdGenerator("counter")
        >>> ids.next_id(), ids.next_id()
        (1, 2)
    """

    STRATEGIES = ("counter", "timestamp")

    def __init__(self, strategy: str = "counter", start: int = 1):
        if strategy not in self.STRATEGIES:
            raise ValueError(f"Unknown id strategy '{strategy}'")
        self.strategy = strategy
        self._counter = itertools.count(start)
        self._last_stamp = 0

    def next_id(self) -> EntityId:
        if self.strategy == "counter":
            return next(self._counter)
        stamp = int(time.time() * 1000)
        if stamp <= self._last_stamp:
            stamp = self._last_stamp + 1
        self._last_stamp = stamp
        return str(stamp)

    def observe(self, entity_id: EntityId) -> None:
        """Advance past an externally assigned id (seed data)."""
        if self.strategy == "counter" and isinstance(entity_id, int):
            current = next(self._counter)
            self._counter = itertools.count(max(current, entity_id + 1))
        elif self.strategy == "timestamp" and str(entity_id).isdigit():
            self._last_stamp = max(self._last_stamp, int(entity_id))


# ============== Entity Store ==============

class RecordView(Sequence[T]):
    """
    Read-only, live view over a store's records.

    Reflects later inserts and removals; it has no mutating methods.
    """

    def __init__(self, records: List[T]):
        self._records = records

    def __getitem__(self, index):
        return self._records[index]

    def __len__(self) -> int:
        return len(self._records)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (RecordView, list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"RecordView({self._records!r})"


class EntityStore(Generic[T]):
    """
    Ordered store of entities keyed by ``id``.

    Features:
    - append-only insertion order
    - partial update by id (only patched fields change)
    - idempotent removal
    - O(1) membership via an id index

    The store never notifies other components; callers re-derive their
    views after a mutation.
    """

    def __init__(self, name: str = "entities"):
        self.name = name
        self._records: List[T] = []
        self._index: Dict[EntityId, T] = {}
        self._view = RecordView(self._records)

    def insert(self, record: T) -> T:
        """
        Append a record.

        Args:
            record: Entity carrying a unique ``id``

        Returns:
            The inserted record

        Raises:
            IdCollisionError: if the id is already present
        """
        entity_id = get_id(record)
        if entity_id in self._index:
            raise IdCollisionError(f"Store '{self.name}' already holds id {entity_id!r}")
        self._records.append(record)
        self._index[entity_id] = record
        logger.info(f"[{self.name}] inserted id={entity_id!r} (size={len(self._records)})")
        return record

    def update(self, entity_id: EntityId, patch: Dict[str, Any]) -> Optional[T]:
        """
        Assign the fields present in ``patch``; other fields are untouched.

        The ``id`` key is never applied. If any assignment is rejected the
        fields already written are restored and the error propagates.

        Returns:
            The updated record, or None when the id is unknown
        """
        record = self._index.get(entity_id)
        if record is None:
            logger.info(f"[{self.name}] update skipped, id={entity_id!r} not found")
            return None
        fields = {key: value for key, value in patch.items() if key != "id"}
        previous = {key: get_field(record, key) for key in fields}
        written = []
        try:
            for key, value in fields.items():
                set_field(record, key, value)
                written.append(key)
        except Exception:
            for key in written:
                set_field(record, key, previous[key])
            logger.warning(f"[{self.name}] update of id={entity_id!r} rolled back")
            raise
        logger.info(f"[{self.name}] updated id={entity_id!r} fields={sorted(fields)}")
        return record

    def remove(self, entity_id: EntityId) -> bool:
        """
        Delete the matching record.

        Returns:
            True if a record was removed, False for an unknown id
        """
        record = self._index.pop(entity_id, None)
        if record is None:
            logger.info(f"[{self.name}] remove skipped, id={entity_id!r} not found")
            return False
        self._records[:] = [r for r in self._records if r is not record]
        logger.info(f"[{self.name}] removed id={entity_id!r} (size={len(self._records)})")
        return True

    def get(self, entity_id: EntityId) -> Optional[T]:
        return self._index.get(entity_id)

    def find_all(self) -> RecordView[T]:
        """Return the stored sequence in insertion order (live, read-only)."""
        return self._view

    def clear(self) -> None:
        """Drop every record (used by tests and reseeding)."""
        self._records.clear()
        self._index.clear()

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._index

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._records))


__all__ = ["EntityId", "IdCollisionError", "IdGenerator", "RecordView", "EntityStore"]
