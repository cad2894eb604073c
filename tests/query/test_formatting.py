import pytest

from apicalypse.query import format_value, quote
from apicalypse.query.formatting import is_scalar
from apicalypse.validation import ValidationError


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, "1"),
        (False, "0"),
        (25, "25"),
        (-3, "-3"),
        (4.5, "4.5"),
        ("Mario", '"Mario"'),
    ],
)
def test_format_value(value, expected):
    assert format_value(value) == expected


def test_quote_escapes_backslash_before_quote():
    assert quote('a"b') == '"a\\"b"'
    assert quote("ends with backslash\\") == '"ends with backslash\\\\"'
    assert quote('\\"') == '"\\\\\\""'


def test_quote_leaves_control_characters_untouched():
    assert quote("\tfood") == '"\tfood"'


def test_is_scalar():
    assert all(is_scalar(value) for value in (True, 1, 1.0, "x"))
    assert not any(is_scalar(value) for value in (None, [1], (1,), {"a": 1}, object()))


@pytest.mark.parametrize(
    "value, expected",
    [
        (1.0, "1.0"),
        (-0.25, "-0.25"),
        (1e20, "100000000000000000000"),
        (1.5e-7, "0.00000015"),
    ],
)
def test_format_value_renders_floats_in_decimal_notation(value, expected):
    assert format_value(value) == expected


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_format_value_rejects_non_finite_floats(value):
    with pytest.raises(ValidationError, match="not a finite number"):
        format_value(value)
