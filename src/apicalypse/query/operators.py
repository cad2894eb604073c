"""
Closed operator and direction vocabularies used when rendering clauses.
"""

from __future__ import annotations

from enum import Enum
from typing import Type, TypeVar

from ..validation import ValidationError, validate_choice


class ComparisonOperator(str, Enum):
    """Comparison operators allowed inside a where condition."""

    EQ = "="
    NEQ = "!="
    GT = ">"
    GTE = ">="
    LT = "<"
    LTE = "<="
    CONTAINS_ALL = "[]"
    NOT_CONTAINS_ALL = "![]"
    CONTAINS_ANY = "()"
    NOT_CONTAINS_ANY = "!()"
    CONTAINS_EXACTLY = "{}"

    @property
    def is_array(self) -> bool:
        return self in ARRAY_OPERATORS


class LogicalOperator(str, Enum):
    """Connectors joining consecutive where conditions."""

    AND = "&"
    OR = "|"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


# Opening/closing brackets emitted after ``field = `` for each array operator.
ARRAY_WRAPPERS: dict[ComparisonOperator, tuple[str, str]] = {
    ComparisonOperator.CONTAINS_ALL: ("[", "]"),
    ComparisonOperator.NOT_CONTAINS_ALL: ("![", "]"),
    ComparisonOperator.CONTAINS_ANY: ("(", ")"),
    ComparisonOperator.NOT_CONTAINS_ANY: ("!(", ")"),
    ComparisonOperator.CONTAINS_EXACTLY: ("{", "}"),
}

ARRAY_OPERATORS = frozenset(ARRAY_WRAPPERS)


TEnum = TypeVar("TEnum", bound=Enum)


def coerce_operator(value: object, enum_cls: Type[TEnum], param: str = "operator") -> TEnum:
    """
    Resolve ``value`` to a member of ``enum_cls``.

    Members pass through untouched; strings match either a member's token
    (``">="``, ``"desc"``) or its name (``"GTE"``), case-insensitively.
    Anything else is rejected.
    """
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        raise ValidationError(
            f"{param} must be a {enum_cls.__name__} or its string token.", param
        )
    by_token = {member.value: member for member in enum_cls}
    if value in by_token:
        return by_token[value]
    allowed = [member.value for member in enum_cls] + [member.name for member in enum_cls]
    matched = validate_choice(value, allowed, param)
    if matched in by_token:
        return by_token[matched]
    return enum_cls[matched]
