"""
propcore/validation/validator.py

Form Validator - runs field rules in declared order and stops at the first
failure, so the caller always gets exactly one field to highlight.
"""
import logging
from typing import Any, Dict, Mapping, Sequence

from propcore.validation.errors import ValidationError
from propcore.validation.rules import FieldRule

logger = logging.getLogger(__name__)


def validate(data: Mapping[str, Any], rules: Sequence[FieldRule]) -> Dict[str, Any]:
    """
    Validate raw form input.

    Several rules may target the same field; each one sees the value left
    by the previous rule. Cross-field rules read from the values cleaned so
    far, so the field they compare against must be declared first.

    Args:
        data: Raw input (unknown keys are ignored)
        rules: Ordered rule list

    Returns:
        Normalised values, one entry per field named by ``rules``

    Raises:
        ValidationError: for the first rule that rejects its field
    """
    cleaned: Dict[str, Any] = {}
    for rule in rules:
        value = cleaned[rule.field] if rule.field in cleaned else data.get(rule.field)
        try:
            cleaned[rule.field] = rule.apply(value, cleaned)
        except ValidationError as e:
            logger.debug(f"Validation failed on {e.field}: {e.message}")
            raise
    return cleaned


__all__ = ["validate"]
