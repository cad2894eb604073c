"""
Rendering of scalar values into Apicalypse tokens.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

from ..validation import ValidationError

SCALAR_TYPES = (bool, int, float, str)


def is_scalar(value: Any) -> bool:
    return isinstance(value, SCALAR_TYPES)


def quote(value: str) -> str:
    """
    Wrap ``value`` in double quotes, escaping backslashes and quotes.

    Backslashes are escaped first so the ones inserted for quotes survive.
    """
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_float(value: float) -> str:
    """
    Render a float in plain decimal notation (``1e20`` -> ``100000000000000000000``).
    """
    if not math.isfinite(value):
        raise ValidationError(f"Float value '{value}' is not a finite number.", "value")
    return format(Decimal(repr(value)), "f")


def format_value(value: Any) -> str:
    """
    Booleans become ``1``/``0``, numbers are emitted bare and everything
    else is quoted as a string.
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return format_float(value)
    return quote(str(value))
