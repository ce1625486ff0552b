"""
propcore/validation/errors.py
"""
from typing import Dict


class ValidationError(Exception):
    """
    Rejected form input.

    Attributes:
        field: Name of the first field that failed
        message: Human-readable reason
    """

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


__all__ = ["ValidationError"]
