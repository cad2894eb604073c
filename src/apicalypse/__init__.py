"""
apicalypse public package initialization.

Fluent builder for Apicalypse query strings (IGDB and similar APIs).
"""

from .config import BuilderConfig  # noqa: F401
from .query import (
    ComparisonOperator,
    Condition,
    LogicalOperator,
    QueryBuilder,
    SortDirection,
    build_condition,
)  # noqa: F401
from .validation import ApicalypseError, StateError, ValidationError  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "ApicalypseError",
    "BuilderConfig",
    "ComparisonOperator",
    "Condition",
    "LogicalOperator",
    "QueryBuilder",
    "SortDirection",
    "StateError",
    "ValidationError",
    "build_condition",
]
