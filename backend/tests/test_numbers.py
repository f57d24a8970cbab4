from decimal import Decimal

import pytest

from farmhub.utils.numbers import ZERO, sum_decimal, to_decimal


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, ZERO),
        (Decimal("10.50"), Decimal("10.50")),
        (3, Decimal("3")),
        (2.5, Decimal("2.5")),
        ("7.25", Decimal("7.25")),
        (" 4 ", Decimal("4")),
    ],
)
def test_to_decimal_accepts_numeric_values(value, expected):
    assert to_decimal(value) == expected


@pytest.mark.parametrize("value", ["abc", "", True, float("nan"), float("inf"), "Infinity", [1]])
def test_to_decimal_malformed_values_become_zero(value):
    assert to_decimal(value) == ZERO


def test_float_sum_is_exact():
    assert sum_decimal([0.1, 0.2]) == Decimal("0.3")


def test_malformed_row_does_not_corrupt_sum():
    assert sum_decimal([10.5, "oops", None, "5.0"]) == Decimal("15.5")


def test_sum_of_nothing_is_zero():
    assert sum_decimal([]) == ZERO
