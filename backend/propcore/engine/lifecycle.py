"""
propcore/engine/lifecycle.py

Status lifecycle engine - enumerated statuses with transition side effects.

Statuses are selected freely: every status can be reached from every other
one (no guarded transition graph). Side effects are limited to derived
fields: a timestamp stamped while a given status is current, and fields
cleared when a status is entered.
"""
from typing import Any, Callable, Dict, List, Optional, Tuple
from dataclasses import dataclass, field
from datetime import datetime
import logging

from propcore.engine.fields import get_field, set_field

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


@dataclass
class LifecycleConfig:
    """
    Lifecycle configuration for one entity kind.

    Attributes:
        name: Entity kind name
        states: All valid statuses
        initial_state: Status assigned at creation
        stamped_fields: status -> timestamp field set while that status is current
        cleared_fields: status -> fields reset to None when entering that status
    """

    name: str
    states: List[str]
    initial_state: str
    stamped_fields: Dict[str, str] = field(default_factory=dict)
    cleared_fields: Dict[str, Tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.initial_state not in self.states:
            raise ValueError(f"Initial state '{self.initial_state}' is not a state of {self.name}")
        unknown = [s for s in (*self.stamped_fields, *self.cleared_fields) if s not in self.states]
        if unknown:
            raise ValueError(f"Side effects declared for unknown states of {self.name}: {unknown}")


class StatusLifecycle:
    """
    Applies status changes and their derived-field side effects.

    Example:
        >>> lifecycle = StatusLifecycle(LifecycleConfig(
        ...     name="maintenance",
        ...     states=["planned", "in-progress", "completed"],
        ...     initial_state="planned",
        ...     stamped_fields={"completed": "completed_at"},
        ... ))
        >>> task = {"id": 1, "status": "planned", "completed_at": None}
        >>> lifecycle.apply_status(task, "completed")["completed_at"] is not None
        True
    """

    def __init__(self, config: LifecycleConfig, clock: Optional[Clock] = None):
        self._config = config
        self._clock = clock or datetime.now

    @property
    def config(self) -> LifecycleConfig:
        return self._config

    @property
    def states(self) -> List[str]:
        return list(self._config.states)

    @property
    def initial_state(self) -> str:
        return self._config.initial_state

    @property
    def derived_fields(self) -> List[str]:
        """Timestamp fields managed by this lifecycle."""
        return list(self._config.stamped_fields.values())

    def is_valid(self, status: Any) -> bool:
        return status in self._config.states

    def reachable_from(self, status: str) -> List[str]:
        """Statuses selectable from ``status`` (all others; no guard graph)."""
        return [s for s in self._config.states if s != status]

    def initialize(self, entity: Any) -> Any:
        """Assign the initial status and its derived fields to a new entity."""
        return self._apply(entity, self._config.initial_state)

    def apply_status(self, entity: Any, new_status: str) -> Any:
        """
        Set ``entity.status`` and apply side effects.

        Args:
            entity: Record (dict or attribute object)
            new_status: Target status, drawn from ``states``

        Returns:
            The same entity, mutated

        Raises:
            ValueError: if ``new_status`` is not a status of this kind
        """
        if not self.is_valid(new_status):
            raise ValueError(f"'{new_status}' is not a status of {self._config.name}")
        previous = get_field(entity, "status")
        self._apply(entity, new_status)
        logger.info(
            f"{self._config.name} {get_field(entity, 'id')!r}: status {previous} -> {new_status}"
        )
        return entity

    def _apply(self, entity: Any, new_status: str) -> Any:
        previous = get_field(entity, "status")
        set_field(entity, "status", new_status)

        for status, field_name in self._config.stamped_fields.items():
            if status == new_status:
                # re-selecting the current status keeps the original stamp
                if previous != new_status or get_field(entity, field_name) is None:
                    set_field(entity, field_name, self._clock())
            else:
                set_field(entity, field_name, None)

        for field_name in self._config.cleared_fields.get(new_status, ()):
            set_field(entity, field_name, None)
        return entity


__all__ = ["Clock", "LifecycleConfig", "StatusLifecycle"]
