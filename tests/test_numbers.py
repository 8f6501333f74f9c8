import math

import pytest

from positions.calculators import parse_number, to_fixed, format_fixed


@pytest.mark.parametrize("raw, expected", [
    ("12.5", 12.5),
    (" 3 ", 3.0),
    ("12abc", 12.0),
    ("-4", -4.0),
    (".5", 0.5),
    ("1e3", 1000.0),
    (7, 7.0),
    (2.25, 2.25),
])
def test_parse_number_accepts_numeric_prefix(raw, expected):
    assert parse_number(raw) == expected


@pytest.mark.parametrize("raw", ["", "   ", "abc", ".", "-", None, True, float("nan"), math.inf])
def test_parse_number_rejects_non_numeric(raw):
    assert parse_number(raw) is None


def test_to_fixed_rounds_to_four_digits():
    assert to_fixed(3000 / 18) == 166.6667
    assert to_fixed(165.00000000000003) == 165.0


def test_to_fixed_exact_tie_goes_away_from_zero():
    # 0.03125 is exactly representable; toFixed(4) gives 0.0313 and -0.0313
    assert to_fixed(0.03125) == 0.0313
    assert to_fixed(-0.03125) == -0.0313


def test_to_fixed_handles_large_values():
    assert to_fixed(1e30) == 1e30


def test_format_fixed():
    assert format_fixed(1000.0) == "1000.0000"
    assert format_fixed(None) == "-"
    assert format_fixed(None, placeholder="") == ""


def test_to_fixed_passes_non_finite_values_through():
    assert to_fixed(math.inf) == math.inf
    assert to_fixed(-math.inf) == -math.inf
    assert math.isnan(to_fixed(math.nan))


def test_format_fixed_non_finite_is_placeholder():
    assert format_fixed(math.inf) == "-"
    assert format_fixed(math.nan, placeholder="") == ""
