"""
propcore/engine/fields.py

Uniform field access for records.

Records may be plain dicts or attribute objects (dataclasses, pydantic
models). Every engine component reads and writes fields through these
helpers so none of them needs to know which one it is handling.
"""
from typing import Any, Mapping, MutableMapping


def get_field(record: Any, name: str, default: Any = None) -> Any:
    """Read a field from a dict or an attribute object."""
    if isinstance(record, Mapping):
        return record.get(name, default)
    return getattr(record, name, default)


def set_field(record: Any, name: str, value: Any) -> None:
    """Write a field on a dict or an attribute object."""
    if isinstance(record, MutableMapping):
        record[name] = value
    else:
        setattr(record, name, value)


def get_id(record: Any) -> Any:
    """Return the record identifier."""
    return get_field(record, "id")


__all__ = ["get_field", "set_field", "get_id"]
