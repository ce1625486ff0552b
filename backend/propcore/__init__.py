"""
propcore - entity status-lifecycle and list-filtering engine

Domain-agnostic building blocks:
- engine: Entity Store, Status Lifecycle, event bus
- views: Filter/Search View, Priority/Sort Order, aggregates
- validation: Form Validator
"""
__version__ = "1.0.0"
