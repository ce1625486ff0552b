"""
API routers
"""
from propdash.routers import dashboard, pool, restaurant
from propdash.routers.entities import build_entity_router

__all__ = ["dashboard", "pool", "restaurant", "build_entity_router"]
