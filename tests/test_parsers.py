"""Tests for attribute value parsing."""

import pytest

from partxref.parsers import (
    is_missing_value,
    normalize_label,
    parse_flag,
    parse_numeric,
    parse_range,
)


class TestParseNumeric:
    """Tests for parse_numeric function."""

    def test_plain_numbers(self):
        assert parse_numeric("10") == 10.0
        assert parse_numeric("6.3") == 6.3
        assert parse_numeric("-40") == -40.0

    def test_units_without_prefix(self):
        assert parse_numeric("25V") == 25.0
        assert parse_numeric("25 V") == 25.0
        assert parse_numeric("2A") == 2.0
        assert parse_numeric("100 Ohms") == 100.0

    def test_si_prefixes(self):
        assert parse_numeric("100nF") == pytest.approx(1e-7)
        assert parse_numeric("4.7µF") == pytest.approx(4.7e-6)
        assert parse_numeric("4.7uF") == pytest.approx(4.7e-6)
        assert parse_numeric("10pF") == pytest.approx(1e-11)
        assert parse_numeric("500mA") == pytest.approx(0.5)
        assert parse_numeric("10kΩ") == pytest.approx(10000)
        assert parse_numeric("1 MHz") == pytest.approx(1e6)
        assert parse_numeric("30 nC") == pytest.approx(3e-8)

    def test_bare_prefix(self):
        """Resistor shorthand: a prefix with no unit still scales."""
        assert parse_numeric("10K") == pytest.approx(10000)
        assert parse_numeric("4.7M") == pytest.approx(4.7e6)

    def test_prefix_inside_word_not_scaled(self):
        assert parse_numeric("±25ppm/°C") == 25.0
        assert parse_numeric("5 min") == 5.0

    def test_millimetres(self):
        assert parse_numeric("1.1mm") == pytest.approx(0.0011)
        assert parse_numeric("0.9 mm") < parse_numeric("1.1 mm")

    def test_fractions(self):
        assert parse_numeric("1/4W") == 0.25
        assert parse_numeric("1/10 W") == pytest.approx(0.1)
        assert parse_numeric("1/0W") is None

    def test_exponent_notation(self):
        assert parse_numeric("1e-06") == pytest.approx(1e-6)
        assert parse_numeric("2.2e-07") == pytest.approx(2.2e-7)
        assert parse_numeric("1.5E-3") == pytest.approx(0.0015)
        assert parse_numeric("1e+06") == pytest.approx(1e6)
        assert parse_numeric("4.7e3 Ohms") == pytest.approx(4700)
        assert parse_numeric("1e-06") > parse_numeric("2.2e-07")

    def test_unicode_minus(self):
        assert parse_numeric("\u22125V") == -5.0
        assert parse_numeric("\u221240°C") == -40.0

    def test_percent(self):
        assert parse_numeric("±1%") == 1.0
        assert parse_numeric("±0.5%") == 0.5

    def test_invalid(self):
        assert parse_numeric("") is None
        assert parse_numeric(None) is None  # type: ignore
        assert parse_numeric("-") is None
        assert parse_numeric("abc") is None


class TestParseRange:
    """Tests for parse_range function."""

    def test_tilde(self):
        assert parse_range("-55°C ~ 125°C") == (-55.0, 125.0)
        assert parse_range("-40°C~+85°C") == (-40.0, 85.0)

    def test_to(self):
        assert parse_range("-40 to 85") == (-40.0, 85.0)

    def test_hyphen_between_numbers(self):
        assert parse_range("-40°C-85°C") == (-40.0, 85.0)
        assert parse_range("-40 - 85") == (-40.0, 85.0)

    def test_unicode_minus(self):
        assert parse_range("\u221240°C ~ 85°C") == (-40.0, 85.0)
        assert parse_range("\u221255°C \u2212 125°C") == (-55.0, 125.0)

    def test_exponent_bounds(self):
        assert parse_range("1e-06 ~ 2.2e-05") == pytest.approx((1e-6, 2.2e-5))
        assert parse_range("1e-06-2e-06") == pytest.approx((1e-6, 2e-6))

    def test_reversed_bounds_are_ordered(self):
        assert parse_range("125 ~ -55") == (-55.0, 125.0)

    def test_single_value_is_not_a_range(self):
        assert parse_range("125°C") is None

    def test_invalid(self):
        assert parse_range("") is None
        assert parse_range("—") is None
        assert parse_range("wide ~ narrow") is None


class TestFlagsAndMissing:
    """Tests for parse_flag and is_missing_value."""

    def test_truthy_flags(self):
        for value in ("Yes", "yes", "TRUE", "1", "Required", " yes "):
            assert parse_flag(value) is True

    def test_falsy_flags(self):
        for value in ("No", "false", "0", "", "-", "AEC-Q200"):
            assert parse_flag(value) is False

    def test_missing_values(self):
        assert is_missing_value(None)
        assert is_missing_value("")
        assert is_missing_value("   ")
        assert is_missing_value("-")
        assert is_missing_value("—")
        assert is_missing_value("–")

    def test_present_values(self):
        assert not is_missing_value("0")
        assert not is_missing_value(0)
        assert not is_missing_value("-40")
        assert not is_missing_value("N/A")

    def test_normalize_label(self):
        assert normalize_label("  Thin   Film ") == "thin film"
