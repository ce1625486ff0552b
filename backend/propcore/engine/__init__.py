"""
propcore/engine - storage and lifecycle engine

- store: ordered entity store and id generation
- lifecycle: status lifecycle with derived-field side effects
- event_bus: in-memory publish/subscribe
"""
from propcore.engine.fields import get_field, set_field, get_id
from propcore.engine.store import EntityId, IdCollisionError, IdGenerator, RecordView, EntityStore
from propcore.engine.lifecycle import Clock, LifecycleConfig, StatusLifecycle
from propcore.engine.event_bus import (
    ALL_EVENTS,
    EventHandler,
    Event,
    PublishResult,
    EventBusStatistics,
    EventBus,
)

__all__ = [
    "get_field",
    "set_field",
    "get_id",
    "EntityId",
    "IdCollisionError",
    "IdGenerator",
    "RecordView",
    "EntityStore",
    "Clock",
    "LifecycleConfig",
    "StatusLifecycle",
    "ALL_EVENTS",
    "EventHandler",
    "Event",
    "PublishResult",
    "EventBusStatistics",
    "EventBus",
]
