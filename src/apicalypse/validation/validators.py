"""
Reusable precondition checks shared by the builder and condition helpers.
"""

from __future__ import annotations

from typing import Any, Iterable

from .errors import ValidationError


def non_empty_string(value: Any, param: str = "value") -> str:
    """
    Return ``value`` trimmed, or raise when it is not a string or is blank.
    """
    if not isinstance(value, str):
        raise ValidationError(f"{param} must be a string.", param)
    trimmed = value.strip()
    if not trimmed:
        raise ValidationError(f"{param} cannot be empty or whitespace.", param)
    return trimmed


def _require_int(value: Any, param: str) -> int:
    # bool is an int subclass; True would otherwise pass as 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{param} must be an integer.", param)
    return value


def positive_int(value: Any, param: str = "value") -> int:
    value = _require_int(value, param)
    if value <= 0:
        raise ValidationError(f"{param} must be positive.", param)
    return value


def non_negative_int(value: Any, param: str = "value") -> int:
    value = _require_int(value, param)
    if value < 0:
        raise ValidationError(f"{param} must be zero or positive.", param)
    return value


def dotted_field(value: Any, param: str = "field") -> str:
    """
    Validate a dotted field path such as ``release_dates.platform.name``.

    The whole path and every ``.``-separated segment must be non-blank.
    """
    field = non_empty_string(value, param)
    for segment in field.split("."):
        if not segment.strip():
            raise ValidationError(f"segment in '{field}' cannot be empty or whitespace.", param)
    return field


def validate_choice(value: str, allowed: Iterable[str], param: str = "value") -> str:
    """
    Case-insensitive membership check returning the matching allowed value.
    """
    options = list(allowed)
    normalized = value.strip().lower()
    for option in options:
        if option.lower() == normalized:
            return option
    raise ValidationError(f"{param} must be one of: {', '.join(options)}", param)
