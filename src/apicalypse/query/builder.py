"""
QueryBuilder implementation providing a chainable Apicalypse query API.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from ..config import BuilderConfig
from ..utils.logging import get_logger
from ..validation import (
    ValidationError,
    dotted_field,
    non_empty_string,
    non_negative_int,
    positive_int,
)
from .conditions import Condition, ConditionChain, build_condition
from .formatting import quote
from .operators import SortDirection, coerce_operator

logger = get_logger("query")

ERROR_SENTINEL = "[ERROR] [INVALID __str__ CALL]"
WILDCARD = "*"


class QueryBuilder:
    """
    Mutable builder assembling ``fields``/``exclude``/``where``/``sort``/
    ``limit``/``offset``/``search`` clauses into one query string.

    Every mutator validates its input before touching state and returns the
    builder itself, so calls can be chained::

        query = (
            QueryBuilder()
            .select("name", "rating")
            .where(build_condition("rating", 80, ComparisonOperator.GT))
            .sort("rating", SortDirection.DESC)
            .limit(10)
            .build()
        )
    """

    build_condition = staticmethod(build_condition)

    def __init__(
        self,
        strict_mode: Optional[bool] = None,
        *,
        config: Optional[BuilderConfig] = None,
    ) -> None:
        config = config or BuilderConfig()
        self._strict_mode = config.strict_mode if strict_mode is None else bool(strict_mode)
        self._fields: List[str] = []
        self._exclude: List[str] = []
        self._conditions = ConditionChain()
        self._sort: List[str] = []
        self._limit: Optional[int] = None
        self._offset: Optional[int] = None
        self._search_term: Optional[str] = None

    def __str__(self) -> str:
        try:
            return self.build()
        except Exception as exc:
            if self._strict_mode:
                raise
            logger.error("Error building query: %s", exc, exc_info=exc)
            return ERROR_SENTINEL

    def __repr__(self) -> str:
        return (
            f"<QueryBuilder fields={len(self._fields)} exclude={len(self._exclude)} "
            f"conditions={len(self._conditions)} sort={len(self._sort)} "
            f"limit={self._limit} offset={self._offset} strict={self._strict_mode}>"
        )

    # Strict mode -------------------------------------------------------
    @property
    def strict_mode(self) -> bool:
        return self._strict_mode

    def is_strict_mode_enabled(self) -> bool:
        return self._strict_mode

    def enable_strict_mode(self, enabled: bool = True) -> "QueryBuilder":
        self._strict_mode = bool(enabled)
        return self

    # Field selection ---------------------------------------------------
    @property
    def fields(self) -> List[str]:
        return list(self._fields)

    def select(self, *fields: str) -> "QueryBuilder":
        """
        Replace the selected fields. A lone ``"*"`` selects every field.
        """
        if not fields:
            raise ValidationError("fields cannot be empty", "fields")
        if fields == (WILDCARD,):
            self._fields = [WILDCARD]
            return self
        self._fields = _validate_fields(fields)
        logger.debug("Selected fields %s", self._fields)
        return self

    def add_fields(self, *fields: str) -> "QueryBuilder":
        """
        Append fields to the current selection, skipping ones already present.
        """
        if not fields:
            raise ValidationError("fields cannot be empty", "fields")
        validated = _validate_fields(fields)
        self._fields = _unique(self._fields + validated)
        return self

    @property
    def excluded_fields(self) -> List[str]:
        return list(self._exclude)

    def exclude(self, *fields: str) -> "QueryBuilder":
        if not fields:
            raise ValidationError("fields cannot be empty", "fields")
        validated = _validate_fields(fields)
        self._exclude = _unique(self._exclude + validated)
        return self

    # Conditions --------------------------------------------------------
    @property
    def conditions(self) -> List[Condition]:
        return self._conditions.as_list()

    def where(self, condition: str) -> "QueryBuilder":
        self._conditions.initial(condition)
        return self

    def and_where(self, condition: str) -> "QueryBuilder":
        self._conditions.and_(condition)
        return self

    def or_where(self, condition: str) -> "QueryBuilder":
        self._conditions.or_(condition)
        return self

    def build_where(self) -> Optional[str]:
        return self._conditions.render()

    # Sort / limit / offset / search ------------------------------------
    @property
    def sort_fields(self) -> List[str]:
        return list(self._sort)

    def sort(self, field: str, direction: SortDirection | str = SortDirection.ASC) -> "QueryBuilder":
        field = non_empty_string(field, "sort field")
        resolved = coerce_operator(direction, SortDirection, "sort direction")
        self._sort.append(f"{field} {resolved.value}")
        return self

    @property
    def limit_value(self) -> Optional[int]:
        return self._limit

    def limit(self, limit: int) -> "QueryBuilder":
        self._limit = positive_int(limit, "limit")
        return self

    @property
    def offset_value(self) -> Optional[int]:
        return self._offset

    def offset(self, offset: int) -> "QueryBuilder":
        self._offset = non_negative_int(offset, "offset")
        return self

    @property
    def search_term(self) -> Optional[str]:
        return self._search_term

    def search(self, term: str) -> "QueryBuilder":
        self._search_term = non_empty_string(term, "search term")
        logger.debug("Search term set (%d chars)", len(self._search_term))
        return self

    # Rendering ---------------------------------------------------------
    def build(self) -> str:
        parts: List[str] = []

        if self._fields:
            parts.append("fields " + ",".join(self._fields) + ";")

        if self._exclude:
            parts.append("exclude " + ",".join(self._exclude) + ";")

        where = self._conditions.render()
        if where:
            parts.append(where)

        if self._sort:
            parts.append("sort " + ",".join(self._sort) + ";")

        if self._limit is not None:
            parts.append(f"limit {self._limit};")

        # zero is a valid offset and must still be rendered
        if self._offset is not None:
            parts.append(f"offset {self._offset};")

        if self._search_term:
            parts.append(f"search {quote(self._search_term)};")

        return " ".join(parts)

    def clear(self) -> "QueryBuilder":
        """
        Reset every clause to its initial state. Strict mode is kept.
        """
        self._fields = []
        self._exclude = []
        self._conditions.clear()
        self._sort = []
        self._limit = None
        self._offset = None
        self._search_term = None
        return self

    # Aliases -----------------------------------------------------------
    set_fields = select
    set_exclusions = exclude
    add_sort = sort
    set_limit = limit
    set_offset = offset
    set_search = search
    render = build
    reset = clear


# Internal helpers --------------------------------------------------
def _validate_fields(fields: Iterable[Any]) -> List[str]:
    return [dotted_field(field, "field") for field in fields]


def _unique(values: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(values))
