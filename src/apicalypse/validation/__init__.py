"""
Validation utilities exposed at the package level.
"""

from .errors import ApicalypseError, StateError, ValidationError
from .validators import (
    dotted_field,
    non_empty_string,
    non_negative_int,
    positive_int,
    validate_choice,
)

__all__ = [
    "ApicalypseError",
    "StateError",
    "ValidationError",
    "dotted_field",
    "non_empty_string",
    "non_negative_int",
    "positive_int",
    "validate_choice",
]
