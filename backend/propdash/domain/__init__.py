"""
propdash/domain - entity kinds per module
"""
from propdash.domain.kinds import EntityKind, KindRegistry
from propdash.domain.hotel import ROOM, RESERVATION, SERVICE_REQUEST, HOTEL_KINDS
from propdash.domain.restaurant import MENU_ITEM, ORDER, TABLE, RESTAURANT_KINDS
from propdash.domain.pool import POOL_ACCESS, MAINTENANCE, POOL_SERVICE, POOL_KINDS

ALL_KINDS = (*HOTEL_KINDS, *RESTAURANT_KINDS, *POOL_KINDS)


def build_registry() -> KindRegistry:
    """Registry holding every kind, in module order."""
    registry = KindRegistry()
    for kind in ALL_KINDS:
        registry.register(kind)
    return registry


__all__ = [
    "EntityKind",
    "KindRegistry",
    "ROOM",
    "RESERVATION",
    "SERVICE_REQUEST",
    "MENU_ITEM",
    "ORDER",
    "TABLE",
    "POOL_ACCESS",
    "MAINTENANCE",
    "POOL_SERVICE",
    "ALL_KINDS",
    "build_registry",
]
