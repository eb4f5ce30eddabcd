from decimal import Decimal

import pytest

from gottip.model.calculator import (
    compute,
    format_currency,
    parse_subtotal,
    round_cents,
    validate_percent,
)


def test_twenty_dollars_at_fifteen_percent():
    result = compute("20.00", 15)
    assert result is not None
    assert result.tip_display == "3.00"
    assert result.total_display == "23.00"


@pytest.mark.parametrize("subtotal", [None, "", "   ", "abc", ".", "1.2.3", "-5", "1e3", "nan", "inf"])
def test_unparseable_subtotal_gives_no_result(subtotal):
    assert compute(subtotal, 15) is None


@pytest.mark.parametrize(
    "subtotal, percent",
    [("0", 0), ("20.00", 15), ("9999999999999.99", 30), ("0.01", 17), ("123.45", 20), (".5", 10), ("7.", 29)],
)
def test_total_is_exactly_subtotal_plus_tip(subtotal, percent):
    result = compute(subtotal, percent)
    assert result.total == result.subtotal + result.tip
    assert result.tip == result.subtotal * percent / Decimal(100)


def test_internal_values_keep_full_precision():
    result = compute("0.01", 15)
    assert result.tip == Decimal("0.0015")
    assert result.tip_display == "0.00"
    assert result.total_display == "0.01"


def test_display_rounds_half_up():
    result = compute("0.10", 25)
    assert result.tip == Decimal("0.025")
    assert result.tip_display == "0.03"


def test_zero_percent_tip():
    result = compute("42.5", 0)
    assert result.tip == 0
    assert result.total_display == "42.50"


@pytest.mark.parametrize("percent", [-1, 31, 100, float("nan")])
def test_percent_out_of_range_raises(percent):
    with pytest.raises(ValueError):
        compute("10", percent)


def test_validate_percent_accepts_bounds():
    assert validate_percent(0) == 0
    assert validate_percent(30) == 30


@pytest.mark.parametrize("text, expected", [("12", "12"), ("12.", "12"), (".5", "0.5"), (" 3.25 ", "3.25")])
def test_parse_subtotal(text, expected):
    assert parse_subtotal(text) == Decimal(expected)


def test_format_currency():
    assert format_currency(Decimal("3")) == "$3.00"
    assert format_currency(Decimal("1234.565")) == "$1234.57"


def test_round_cents_handles_large_amounts():
    assert str(round_cents(Decimal("9999999999999999") * Decimal("1.3"))) == "12999999999999998.70"


@pytest.mark.parametrize("subtotal", ["١٢", "١٢.٥", "１２", "12²"])
def test_non_ascii_digits_are_not_a_subtotal(subtotal):
    assert parse_subtotal(subtotal) is None
    assert compute(subtotal, 15) is None
