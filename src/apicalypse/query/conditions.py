"""
Where-clause assembly: condition expressions and the chain that joins them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional

from ..utils.logging import get_logger
from ..validation import StateError, ValidationError, non_empty_string
from .formatting import format_value, is_scalar
from .operators import ARRAY_WRAPPERS, ComparisonOperator, LogicalOperator, coerce_operator

logger = get_logger("query.conditions")

ERROR_INITIAL_ALREADY_SET = "Initial where condition is already set."
ERROR_OR_FIRST = "Cannot start conditions with OR."


@dataclass(frozen=True)
class Condition:
    """
    One entry of the where chain. ``operator`` is ``None`` only for the first.
    """

    operator: Optional[LogicalOperator]
    text: str


class ConditionChain:
    """
    Ordered, append-only list of conditions joined by ``&`` / ``|``.

    The chain is either empty or started; ``initial`` only works on an empty
    chain, ``or_`` only on a started one, and ``and_`` starts the chain when
    it is empty.
    """

    def __init__(self) -> None:
        self._conditions: List[Condition] = []

    # Public API --------------------------------------------------------
    def initial(self, condition: str) -> "ConditionChain":
        text = non_empty_string(condition, "where condition")
        if self._conditions:
            raise StateError(ERROR_INITIAL_ALREADY_SET)
        self._conditions.append(Condition(None, text))
        return self

    def and_(self, condition: str) -> "ConditionChain":
        text = non_empty_string(condition, "and_where condition")
        operator = LogicalOperator.AND if self._conditions else None
        self._conditions.append(Condition(operator, text))
        return self

    def or_(self, condition: str) -> "ConditionChain":
        text = non_empty_string(condition, "or_where condition")
        if not self._conditions:
            raise StateError(ERROR_OR_FIRST)
        self._conditions.append(Condition(LogicalOperator.OR, text))
        return self

    def render(self) -> Optional[str]:
        if not self._conditions:
            return None

        parts: List[str] = []
        for index, entry in enumerate(self._conditions):
            if index == 0:
                parts.append(entry.text)
            elif entry.operator is LogicalOperator.AND:
                parts.append(f"& {entry.text}")
            elif entry.operator is LogicalOperator.OR:
                parts.append(f"| {entry.text}")
            else:
                raw = entry.operator.value if isinstance(entry.operator, LogicalOperator) else entry.operator
                raise StateError(f"Unexpected operator '{raw}' in conditions.")
        return "where " + " ".join(parts) + ";"

    def clear(self) -> None:
        self._conditions.clear()

    def as_list(self) -> List[Condition]:
        return list(self._conditions)

    def __iter__(self) -> Iterator[Condition]:
        return iter(list(self._conditions))

    def __len__(self) -> int:
        return len(self._conditions)

    def __bool__(self) -> bool:
        return bool(self._conditions)


def build_condition(
    field: str,
    value: Any,
    operator: ComparisonOperator | str = ComparisonOperator.EQ,
) -> str:
    """
    Build a single condition expression without touching any builder.

    Examples::

        build_condition("rating", 90, ComparisonOperator.GT)   # rating > 90
        build_condition("platforms", [6, 48], "()")            # platforms = (6,48)
        build_condition("name", "Mario", ComparisonOperator.NEQ)  # name != "Mario"
        build_condition("active", True)                        # active = 1
    """
    if not isinstance(field, str) or not field.strip():
        raise ValidationError("Field cannot be empty", "field")
    field = field.strip()
    op = coerce_operator(operator, ComparisonOperator)

    if op.is_array:
        return _format_array_condition(field, value, op)

    if not is_scalar(value):
        raise ValidationError(f"Value for operator '{op.value}' must be scalar type.", "value")
    if isinstance(value, str) and not value.strip():
        raise ValidationError(f"Value for operator '{op.value}' cannot be empty.", "value")

    return f"{field} {op.value} {format_value(value)}"


# Internal helpers --------------------------------------------------
def _format_array_condition(field: str, value: Any, operator: ComparisonOperator) -> str:
    if not isinstance(value, (list, tuple)) or not value:
        raise ValidationError(
            f"Value must be a non-empty array for operator '{operator.value}'.", "value"
        )
    for index, element in enumerate(value):
        if not is_scalar(element):
            raise ValidationError(
                f"Element {index} for operator '{operator.value}' must be scalar.", "value"
            )

    formatted = ",".join(format_value(element) for element in value)
    opening, closing = ARRAY_WRAPPERS[operator]
    logger.debug("Formatted %d values for operator '%s'", len(value), operator.value)
    return f"{field} = {opening}{formatted}{closing}"
