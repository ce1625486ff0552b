"""
Entity service
One instance per entity kind: owns the kind's store and wires the form
validator, status lifecycle and list views together.

Every write validates first; nothing is mutated when validation fails.
"""
import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union
from pydantic import ValidationError as PydanticValidationError

from propcore.engine import (
    Clock, EntityId, EntityStore, IdGenerator, StatusLifecycle, get_field,
)
from propcore.validation import OneOf, ValidationError, validate
from propcore.views import (
    FilterCriteria, apply_filters, count_by, group_by, newest_first, ratio_summary, sort_by_rank,
)
from propdash.config import Settings, settings as default_settings
from propdash.domain.kinds import EntityKind
from propdash.models.events import Notification, NotificationType, NotificationVariant
from propdash.models.records import EntityRecord
from propdash.services.notification_service import NotificationService

logger = logging.getLogger(__name__)


def field_error(error: PydanticValidationError) -> ValidationError:
    """First error of a record model as a form ValidationError."""
    first = error.errors()[0]
    field = ".".join(str(part) for part in first["loc"]) or "record"
    return ValidationError(field, first["msg"])


class EntityService:
    """
    Entity kind service

    Example:
        >>> service = EntityService(ROOM, NotificationService(EventBus()))
        >>> room = service.create({"number": "101", "room_type": "Standard", "price": "15000",
        ...                        "capacity": "2", "floor": "1", "amenities": "WiFi, TV"})
        >>> room.status, room.amenities
        ('available', ['WiFi', 'TV'])
    """

    def __init__(
        self,
        kind: EntityKind,
        notifications: NotificationService,
        settings: Optional[Settings] = None,
        clock: Optional[Clock] = None,
    ):
        self.kind = kind
        self.notifications = notifications
        self.settings = settings or default_settings
        self._clock = clock or datetime.now
        self.store: EntityStore[EntityRecord] = EntityStore(kind.name)
        self.ids = IdGenerator(kind.id_strategy)
        self.lifecycle = StatusLifecycle(kind.lifecycle, clock=self._clock)
        self._status_rule = OneOf("status", kind.statuses)

    # ============== Helpers ==============

    def parse_id(self, raw: Union[str, int]) -> EntityId:
        """Path parameter -> stored id type (int for counter kinds)."""
        if self.kind.id_strategy == "counter" and isinstance(raw, str) and raw.isdigit():
            return int(raw)
        return raw

    def _rejected(self, error: ValidationError) -> None:
        logger.warning(f"[{self.kind.name}] rejected input: {error.field}: {error.message}")
        self.notifications.validation_failed(error, kind=self.kind.name)

    def _validate(self, data: Mapping[str, Any], rules) -> Dict[str, Any]:
        try:
            return validate(data, rules)
        except ValidationError as e:
            self._rejected(e)
            raise

    def _build(self, values: Dict[str, Any]) -> EntityRecord:
        """Instantiate the record model; a rejected field becomes a ValidationError."""
        try:
            return self.kind.record_class(**values)
        except PydanticValidationError as e:
            error = field_error(e)
            self._rejected(error)
            raise error from e

    def _derived(self, cleaned: Dict[str, Any]) -> Dict[str, Any]:
        values = dict(cleaned)
        if self.kind.derive:
            values.update(self.kind.derive(cleaned, self.settings))
        return values

    def _notify(self, notification_type: NotificationType, title: str, description: str,
                record: Any, variant: str = NotificationVariant.DEFAULT.value, **extra) -> None:
        self.notifications.notify(
            notification_type,
            Notification(
                title=title,
                description=description,
                variant=variant,
                kind=self.kind.name,
                entity_id=get_field(record, "id"),
                extra=extra,
            ),
            source=self.kind.name,
        )

    # ============== Queries ==============

    def get(self, entity_id: EntityId) -> Optional[EntityRecord]:
        return self.store.get(entity_id)

    def list_view(self, filters: Optional[Mapping[str, Any]] = None, search: str = "") -> List[EntityRecord]:
        """
        Ordered display list

        Args:
            filters: field -> value; sentinels ("all", "tous", "toutes") and
                None leave the field unconstrained, undeclared fields are ignored
            search: Case-insensitive text matched against the kind's search fields

        Returns:
            Filtered records; newest first where the kind says so, then
            stably sorted by rank where the kind has one
        """
        equals = {}
        for name, value in (filters or {}).items():
            if name in self.kind.filter_fields:
                equals[name] = value
            else:
                logger.debug(f"[{self.kind.name}] ignoring undeclared filter '{name}'")

        criteria = FilterCriteria(equals=equals, search=search or "", search_fields=self.kind.search_fields)
        records = apply_filters(self.store.find_all(), criteria)
        if self.kind.newest_first:
            records = newest_first(records)
        if self.kind.rank_field:
            records = sort_by_rank(records, self.kind.rank_field, self.kind.ranks)
        return records

    def grouped(self, field_name: str, filters: Optional[Mapping[str, Any]] = None,
                search: str = "") -> Dict[str, List[EntityRecord]]:
        """List view split by an enumerated field (every value present, possibly empty)."""
        values = self.kind.filter_fields.get(field_name) or []
        return group_by(self.list_view(filters, search), field_name, values)

    def summary(self) -> Dict[str, Any]:
        """Aggregate counts, recomputed from the whole store."""
        records = self.store.find_all()
        result: Dict[str, Any] = {
            "kind": self.kind.name,
            "total": len(records),
            "by_status": count_by(records, "status", self.kind.statuses),
            "breakdowns": {
                name: count_by(records, name, values)
                for name, values in self.kind.enumerated_filters.items()
                if name != "status"
            },
            "occupancy": None,
        }
        if self.kind.occupied_statuses:
            result["occupancy"] = ratio_summary(records, "status", self.kind.occupied_statuses)
        return result

    # ============== Commands ==============

    def create(self, data: Mapping[str, Any]) -> EntityRecord:
        """
        Validate a form and append the new record

        The record gets a fresh id and the kind's initial status.

        Raises:
            ValidationError: first rejected field; the store is unchanged
        """
        cleaned = self._validate(data, self.kind.rules)
        values = self._derived(cleaned)
        if self.kind.on_create:
            values.update(self.kind.on_create(self._clock()))

        record = self._build({**values, "id": self.ids.next_id(), "status": self.lifecycle.initial_state})
        self.lifecycle.initialize(record)
        self.store.insert(record)
        logger.info(f"[{self.kind.name}] created {record.id!r}")

        self._notify(
            NotificationType.ENTITY_CREATED,
            f"{self.kind.label} created",
            f"{self.kind.describe(record)} has been added.",
            record,
        )
        return record

    def edit(self, entity_id: EntityId, data: Mapping[str, Any]) -> Optional[EntityRecord]:
        """
        Full-record edit

        Every form field is re-validated and replaced; derived fields are
        recomputed. A ``status`` in the payload goes through the lifecycle.
        The whole candidate record is validated before the stored one changes.

        Raises:
            ValidationError: first rejected field; the stored record is unchanged

        Returns:
            The updated record, or None for an unknown id
        """
        record = self.store.get(entity_id)
        if record is None:
            logger.info(f"[{self.kind.name}] edit skipped, {entity_id!r} not found")
            return None

        rules = (*self.kind.rules, OneOf("status", self.kind.statuses, optional=True))
        cleaned = self._validate(data, rules)
        new_status = cleaned.pop("status")

        values = self._derived(cleaned)
        candidate = self._build({**record.model_dump(), **values})
        self.store.update(entity_id, {name: getattr(candidate, name) for name in values})
        if new_status is not None and new_status != record.status:
            self.lifecycle.apply_status(record, new_status)

        self._notify(
            NotificationType.ENTITY_UPDATED,
            f"{self.kind.label} updated",
            f"{self.kind.describe(record)} has been updated.",
            record,
        )
        return record

    def change_status(self, entity_id: EntityId, status: Any) -> Optional[EntityRecord]:
        """
        Select a new status (any status is selectable from any other)

        Raises:
            ValidationError: ``status`` is not one of the kind's statuses

        Returns:
            The updated record, or None for an unknown id
        """
        new_status = self._validate({"status": status}, (self._status_rule,))["status"]
        record = self.store.get(entity_id)
        if record is None:
            logger.info(f"[{self.kind.name}] status change skipped, {entity_id!r} not found")
            return None

        previous = record.status
        self.lifecycle.apply_status(record, new_status)
        self._notify(
            NotificationType.STATUS_CHANGED,
            "Status updated",
            f"{self.kind.describe(record)}: {previous} -> {new_status}",
            record,
            previous=previous,
            status=new_status,
        )
        return record

    def delete(self, entity_id: EntityId) -> bool:
        """
        Remove a record immediately

        Returns:
            False when the id is unknown (no-op)
        """
        record = self.store.get(entity_id)
        if record is None or not self.store.remove(entity_id):
            return False
        self._notify(
            NotificationType.ENTITY_DELETED,
            f"{self.kind.label} deleted",
            f"{self.kind.describe(record)} has been removed.",
            record,
            variant=NotificationVariant.DESTRUCTIVE.value,
        )
        return True

    def load(self, records: Iterable[Union[Mapping[str, Any], EntityRecord]]) -> int:
        """
        Insert pre-built records (demo data) as-is

        Ids are kept and the id generator moves past them; no notification
        is published.
        """
        count = 0
        for raw in records:
            record = raw if isinstance(raw, EntityRecord) else self.kind.record_class(**raw)
            if not self.lifecycle.is_valid(record.status):
                raise ValueError(f"'{record.status}' is not a status of {self.kind.name}")
            self.ids.observe(record.id)
            self.store.insert(record)
            count += 1
        logger.info(f"[{self.kind.name}] loaded {count} records")
        return count


__all__ = ["EntityService"]
