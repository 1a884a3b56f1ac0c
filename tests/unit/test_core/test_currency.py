#!/usr/bin/env python3
"""Tests for core currency utilities."""

from decimal import Decimal

import pytest

from clear_assistant.core.currency import (
    INT64_MAX,
    INT64_MIN,
    decimal_to_milliunits,
    fits_int64,
    format_milliunits,
    milliunits_to_decimal,
    milliunits_to_dollars_str,
    parse_milliunits,
    to_decimal,
)


class TestToDecimal:
    """Test parsing heterogeneous amounts into Decimal."""

    @pytest.mark.currency
    def test_string_formats(self):
        """Test dollar signs and thousands separators are accepted."""
        assert to_decimal("12.34") == Decimal("12.34")
        assert to_decimal("$12.34") == Decimal("12.34")
        assert to_decimal("1,234.56") == Decimal("1234.56")
        assert to_decimal("  -7.5 ") == Decimal("-7.5")

    @pytest.mark.currency
    def test_numeric_inputs(self):
        """Test int, float and Decimal inputs."""
        assert to_decimal(12) == Decimal(12)
        assert to_decimal(0.1) == Decimal("0.1")
        assert to_decimal(Decimal("-3.25")) == Decimal("-3.25")

    @pytest.mark.currency
    @pytest.mark.parametrize(
        "value",
        ["", "   ", "123.abc", "FREE", "nan", "NaN", "inf", "-Infinity", float("nan"), float("inf"), None, True],
    )
    def test_rejects_non_finite_or_garbage(self, value):
        """Test that anything not a finite decimal raises ValueError."""
        with pytest.raises(ValueError):
            to_decimal(value)

    @pytest.mark.currency
    def test_oversized_exponent_raises_value_error(self):
        with pytest.raises(ValueError, match="out of range"):
            decimal_to_milliunits(Decimal("1e1000000"))
        with pytest.raises(ValueError):
            parse_milliunits("-1e1000000")

    @pytest.mark.currency
    def test_rejects_unsupported_types(self):
        with pytest.raises(ValueError):
            to_decimal([1, 2])  # type: ignore[arg-type]


class TestMilliunitConversion:
    """Test conversion to YNAB milliunits."""

    @pytest.mark.currency
    def test_parse_milliunits(self):
        """Test the three-implied-decimal convention."""
        assert parse_milliunits("45.99") == 45990
        assert parse_milliunits("-45.99") == -45990
        assert parse_milliunits(1) == 1000
        assert parse_milliunits("0.001") == 1
        assert parse_milliunits(0) == 0

    @pytest.mark.currency
    def test_float_inputs_do_not_drift(self):
        """Test that binary float representation does not leak into milliunits."""
        assert parse_milliunits(0.1) == 100
        assert parse_milliunits(1.005) == 1005
        assert parse_milliunits(19.99) == 19990

    @pytest.mark.currency
    def test_rounds_half_away_from_zero(self):
        """Test sub-milliunit digits are rounded half away from zero."""
        assert decimal_to_milliunits(Decimal("1.0005")) == 1001
        assert decimal_to_milliunits(Decimal("-1.0005")) == -1001
        assert decimal_to_milliunits(Decimal("1.0004")) == 1000

    @pytest.mark.currency
    def test_milliunits_to_decimal_is_exact(self):
        assert milliunits_to_decimal(45990) == Decimal("45.99")
        assert milliunits_to_decimal(-1) == Decimal("-0.001")


class TestFormatting:
    """Test display formatting."""

    @pytest.mark.currency
    def test_milliunits_to_dollars_str(self):
        assert milliunits_to_dollars_str(45990) == "45.99"
        assert milliunits_to_dollars_str(-45990) == "-45.99"
        assert milliunits_to_dollars_str(5) == "0.00"
        assert milliunits_to_dollars_str(-5) == "0.00"
        assert milliunits_to_dollars_str(50) == "0.05"

    @pytest.mark.currency
    def test_format_milliunits(self):
        assert format_milliunits(45990) == "$45.99"
        assert format_milliunits(-45990) == "-$45.99"
        assert format_milliunits(0) == "$0.00"


class TestInt64Range:
    """Test the overflow boundary helper."""

    @pytest.mark.currency
    def test_fits_int64(self):
        assert fits_int64(INT64_MAX)
        assert fits_int64(INT64_MIN)
        assert not fits_int64(INT64_MAX + 1)
        assert not fits_int64(INT64_MIN - 1)
