"""
propcore/validation - Form Validator
"""
from propcore.validation.errors import ValidationError
from propcore.validation.rules import (
    is_blank,
    parse_date,
    FieldRule,
    Required,
    MinLength,
    Text,
    Numeric,
    OneOf,
    DateValue,
    DateAfter,
    Email,
    CommaList,
)
from propcore.validation.validator import validate

__all__ = [
    "ValidationError",
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
    "validate",
]
