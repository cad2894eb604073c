import pytest

from apicalypse.query import ARRAY_OPERATORS, ComparisonOperator, LogicalOperator, SortDirection
from apicalypse.query.operators import coerce_operator
from apicalypse.validation import ValidationError


def test_operator_tokens():
    assert [op.value for op in ComparisonOperator] == [
        "=", "!=", ">", ">=", "<", "<=", "[]", "![]", "()", "!()", "{}",
    ]
    assert LogicalOperator.AND.value == "&"
    assert LogicalOperator.OR.value == "|"
    assert SortDirection.ASC.value == "asc"
    assert SortDirection.DESC.value == "desc"


def test_array_operator_set():
    assert ARRAY_OPERATORS == {
        ComparisonOperator.CONTAINS_ALL,
        ComparisonOperator.NOT_CONTAINS_ALL,
        ComparisonOperator.CONTAINS_ANY,
        ComparisonOperator.NOT_CONTAINS_ANY,
        ComparisonOperator.CONTAINS_EXACTLY,
    }
    assert ComparisonOperator.CONTAINS_ANY.is_array
    assert not ComparisonOperator.GTE.is_array


@pytest.mark.parametrize(
    "raw, expected",
    [
        (ComparisonOperator.LT, ComparisonOperator.LT),
        (">=", ComparisonOperator.GTE),
        ("gte", ComparisonOperator.GTE),
        ("CONTAINS_ANY", ComparisonOperator.CONTAINS_ANY),
        ("()", ComparisonOperator.CONTAINS_ANY),
    ],
)
def test_coerce_comparison_operator(raw, expected):
    assert coerce_operator(raw, ComparisonOperator) is expected


def test_coerce_sort_direction_case_insensitive():
    assert coerce_operator("DESC", SortDirection) is SortDirection.DESC
    assert coerce_operator("asc", SortDirection) is SortDirection.ASC


@pytest.mark.parametrize("raw", ["~", "like", 3, None])
def test_coerce_rejects_unknown(raw):
    with pytest.raises(ValidationError):
        coerce_operator(raw, ComparisonOperator)
