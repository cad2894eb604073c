"""
Query construction APIs for apicalypse.
"""

from .builder import ERROR_SENTINEL, QueryBuilder
from .conditions import Condition, ConditionChain, build_condition
from .formatting import format_value, quote
from .operators import ARRAY_OPERATORS, ComparisonOperator, LogicalOperator, SortDirection

__all__ = [
    "ARRAY_OPERATORS",
    "ERROR_SENTINEL",
    "ComparisonOperator",
    "Condition",
    "ConditionChain",
    "LogicalOperator",
    "QueryBuilder",
    "SortDirection",
    "build_condition",
    "format_value",
    "quote",
]
