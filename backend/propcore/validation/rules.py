"""
propcore/validation/rules.py

Field rules for the form validator.

Each rule checks one field, may read fields already normalised by earlier
rules (cross-field checks), and returns the normalised value. Rules marked
``optional`` accept a missing or blank value and normalise it to None.
"""
from abc import ABC, abstractmethod
from datetime import date, datetime
from decimal import Decimal
import math
import re
from typing import Any, Dict, Iterable, List, Optional, Union

from propcore.validation.errors import ValidationError

Number = Union[int, float]

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def is_blank(value: Any) -> bool:
    """None, or a string that is empty once stripped."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


class FieldRule(ABC):
    """Rule interface."""

    default_message = "Invalid value"
    # reported for a blank value on a non-optional rule; None defers to check()
    blank_message: Optional[str] = "This field is required"

    def __init__(self, field: str, message: Optional[str] = None, optional: bool = False):
        self.field = field
        self.custom_message = message
        self.message = message or self.default_message
        self.optional = optional

    def apply(self, value: Any, cleaned: Dict[str, Any]) -> Any:
        """
        Evaluate the rule.

        Args:
            value: Current value of the field (possibly normalised already)
            cleaned: Values normalised so far, in declared order

        Returns:
            The normalised value

        Raises:
            ValidationError: if the value is rejected
        """
        if is_blank(value):
            if self.optional:
                return None
            if self.blank_message is not None:
                self.fail(self.custom_message or self.blank_message)
        return self.check(value, cleaned)

    @abstractmethod
    def check(self, value: Any, cleaned: Dict[str, Any]) -> Any:
        raise NotImplementedError

    def fail(self, message: Optional[str] = None) -> None:
        raise ValidationError(self.field, message or self.message)

    def text_of(self, value: Any) -> str:
        """Scalar as stripped text; lists, mappings and booleans are rejected."""
        if isinstance(value, bool) or not isinstance(value, (str, int, float, Decimal)):
            self.fail("Must be text")
        return str(value).strip()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.field!r})"


class Required(FieldRule):
    """Present and non-blank text; numbers are read as their text."""

    default_message = "This field is required"

    def check(self, value: Any, cleaned: Dict[str, Any]) -> str:
        return self.text_of(value)


class MinLength(FieldRule):
    """String of at least ``length`` characters (surrounding spaces ignored)."""

    def __init__(self, field: str, length: int, message: Optional[str] = None, optional: bool = False):
        super().__init__(field, message, optional)
        self.message = message or f"Must be at least {length} characters"
        self.length = length

    def check(self, value: Any, cleaned: Dict[str, Any]) -> str:
        text = self.text_of(value)
        if len(text) < self.length:
            self.fail()
        return text


class Text(FieldRule):
    """Free text, optional by default; blank becomes None."""

    blank_message = None

    def __init__(self, field: str, max_length: Optional[int] = None, message: Optional[str] = None,
                 optional: bool = True):
        super().__init__(field, message, optional)
        self.message = message or f"Must be at most {max_length} characters"
        self.max_length = max_length

    def check(self, value: Any, cleaned: Dict[str, Any]) -> str:
        text = "" if value is None else self.text_of(value)
        if self.max_length is not None and len(text) > self.max_length:
            self.fail()
        return text


class Numeric(FieldRule):
    """
    Number parsed from a number or numeric string, with an optional range.

    ``integer=True`` requires a whole number and returns an int.
    """

    def __init__(self, field: str, minimum: Optional[Number] = None, maximum: Optional[Number] = None,
                 integer: bool = False, message: Optional[str] = None, optional: bool = False):
        super().__init__(field, message, optional)
        self.minimum = minimum
        self.maximum = maximum
        self.integer = integer

    def _range_message(self) -> str:
        if self.minimum is not None and self.maximum is not None:
            return f"Must be between {self.minimum} and {self.maximum}"
        if self.minimum is not None:
            return f"Must be at least {self.minimum}"
        return f"Must be at most {self.maximum}"

    def check(self, value: Any, cleaned: Dict[str, Any]) -> Number:
        number = self._parse(value)
        if number is None:
            self.fail(self.custom_message or ("Must be a whole number" if self.integer else "Must be a number"))
        if (self.minimum is not None and number < self.minimum) or \
                (self.maximum is not None and number > self.maximum):
            self.fail(self.custom_message or self._range_message())
        return number

    def _parse(self, value: Any) -> Optional[Number]:
        if isinstance(value, bool) or value is None:
            return None
        if isinstance(value, (int, float, Decimal)):
            number = float(value)
        elif isinstance(value, str):
            text = value.strip().replace(" ", "").replace("_", "")
            if not text:
                return None
            try:
                number = float(text)
            except ValueError:
                return None
        else:
            return None
        if not math.isfinite(number):
            return None
        if self.integer:
            if not number.is_integer():
                return None
            return int(number)
        return number


class OneOf(FieldRule):
    """Member of an enumerated set."""

    def __init__(self, field: str, choices: Iterable[str], message: Optional[str] = None,
                 optional: bool = False):
        self.choices = [getattr(c, "value", c) for c in choices]
        super().__init__(field, message, optional)
        self.message = message or f"Must be one of: {', '.join(self.choices)}"

    def check(self, value: Any, cleaned: Dict[str, Any]) -> str:
        value = getattr(value, "value", value)
        if value not in self.choices:
            self.fail()
        return value


class DateValue(FieldRule):
    """
    A date, datetime or ISO-8601 string, normalised to ``date``.

    A custom ``message`` is reported for a missing date; an unreadable one
    always reports the expected format.
    """

    default_message = "Invalid date, expected YYYY-MM-DD"

    def check(self, value: Any, cleaned: Dict[str, Any]) -> date:
        parsed = parse_date(value)
        if parsed is None:
            self.fail(self.default_message)
        return parsed


class DateAfter(DateValue):
    """
    Date strictly after the (already validated) date in ``other``.

    ``allow_equal=True`` also accepts the same day. When ``other`` is absent
    only the date format is checked.
    """

    def __init__(self, field: str, other: str, allow_equal: bool = False, message: Optional[str] = None,
                 optional: bool = False):
        super().__init__(field, None, optional)
        self.other = other
        self.allow_equal = allow_equal
        self.order_message = message or (
            f"Must be on or after {other}" if allow_equal else f"Must be after {other}"
        )

    def check(self, value: Any, cleaned: Dict[str, Any]) -> date:
        parsed = parse_date(value)
        if parsed is None:
            self.fail(self.default_message)
        reference = parse_date(cleaned.get(self.other))
        if reference is not None:
            if parsed < reference or (parsed == reference and not self.allow_equal):
                self.fail(self.order_message)
        return parsed


class Email(FieldRule):
    default_message = "Invalid email address"

    def check(self, value: Any, cleaned: Dict[str, Any]) -> str:
        text = self.text_of(value)
        if not EMAIL_PATTERN.match(text):
            self.fail()
        return text


class CommaList(FieldRule):
    """Comma-separated text (or a list) normalised to a list of trimmed items."""

    blank_message = None

    def check(self, value: Any, cleaned: Dict[str, Any]) -> List[str]:
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            items = [str(v) for v in value]
        elif isinstance(value, str):
            items = value.split(",")
        else:
            self.fail()
        return [item.strip() for item in items if item.strip()]


def parse_date(value: Any) -> Optional[date]:
    """Parse a date-like value; None when it cannot be read as a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        text = value.strip()
        try:
            return date.fromisoformat(text[:10]) if len(text) > 10 and text[10] in "T " \
                else date.fromisoformat(text)
        except ValueError:
            return None
    return None


__all__ = [
    "is_blank",
    "parse_date",
    "FieldRule",
    "Required",
    "MinLength",
    "Text",
    "Numeric",
    "OneOf",
    "DateValue",
    "DateAfter",
    "Email",
    "CommaList",
]
