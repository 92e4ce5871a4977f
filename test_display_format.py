"""
Tests for result formatting and operand parsing
"""
import math

import pytest

from display_format import format_result, parse_operand, to_display_string, to_exponential, to_fixed


@pytest.mark.parametrize("num,expected", [
    (10.0, "10"),
    (-5.0, "-5"),
    (0.0, "0"),
    (-0.0, "0"),
    (3.75, "3.75"),
    (0.1 + 0.2, "0.30000000000000004"),
    (1e16, "10000000000000000"),
    (1.5e21, "1.5e+21"),
    (1e21, "1e+21"),
    (0.000001, "0.000001"),
    (1e-7, "1e-7"),
    (-1.25e-8, "-1.25e-8"),
    (123456.789, "123456.789"),
    (math.inf, "Infinity"),
    (-math.inf, "-Infinity"),
    (math.nan, "NaN"),
])
def test_to_display_string(num, expected):
    assert to_display_string(num) == expected


def test_short_results_unchanged():
    assert format_result(42.0) == "42"
    assert format_result(1234567890123.0) == "1234567890123"
    assert format_result(0.125) == "0.125"
    assert format_result(1e-7) == "1e-7"


def test_long_fraction_rounded_to_display_width():
    assert format_result(1 / 3) == "0.33333333333"
    assert format_result(2 / 3) == "0.66666666667"
    assert format_result(-2 / 3) == "-0.66666666667"
    assert format_result(123456.78901234567) == "123456.789012"


def test_rounding_is_half_away_from_zero():
    # .125 is exact in binary, so these are true ties
    assert format_result(1234567890.125) == "1234567890.13"
    assert format_result(-123456789.125) == "-123456789.13"
    assert to_fixed(0.5, 0) == "1"
    assert to_fixed(2.5, 0) == "3"


def test_integer_part_fills_display():
    # no room left for decimals, the point is dropped too
    assert format_result(999999999999.75) == "1000000000000"
    assert format_result(-1234567890123.5) == "-1234567890124"


def test_large_magnitude_uses_exponential():
    assert format_result(99999980000001.0) == "9.9999980e+13"
    assert format_result(-99999980000001.0) == "-9.9999980e+13"
    assert format_result(1e13 * 12345678) == "1.2345678e+20"
    assert format_result(1e20) == "1.0000000e+20"


def test_short_exponential_string_kept_as_is():
    # at or above 10 ** 13 but already short enough to fit
    assert format_result(1e13 * 1e13) == "1e+26"
    assert format_result(1e300) == "1e+300"


def test_exponential_tie_rounds_up():
    assert format_result(12345678500000.0) == "1.2345679e+13"


def test_exponential_carry_into_next_decade():
    assert to_exponential(99999999500000.0, 7) == "1.0000000e+14"


def test_long_tiny_fraction_uses_fixed_notation():
    assert format_result(1.234567890123e-7) == "0.00000012346"


def test_custom_width():
    assert format_result(1 / 3, max_digits=5) == "0.333"
    assert format_result(123456.0, max_digits=5) == "1e+5"


@pytest.mark.parametrize("text,expected", [
    ("0", 0.0),
    ("12", 12.0),
    ("12.", 12.0),
    ("0.5", 0.5),
    ("-5", -5.0),
    ("9.9999980e+13", 99999980000000.0),
    ("1.2345679e+", 1.2345679),
    ("1e-7", 1e-7),
    ("Infinity", math.inf),
    ("-Infinity", -math.inf),
])
def test_parse_operand(text, expected):
    assert parse_operand(text) == expected


def test_parse_operand_without_number():
    assert math.isnan(parse_operand("abc"))
    assert math.isnan(parse_operand(""))
