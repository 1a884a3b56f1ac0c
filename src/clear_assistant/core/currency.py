#!/usr/bin/env python3
"""
Currency Conversion and Handling Utilities

All reconciliation arithmetic uses integer milliunits to avoid floating-point
drift while summing transaction amounts.

Currency Systems:
- YNAB uses milliunits: 1000 milliunits = $1.00
- Display uses dollar strings: "$12.34"

Key Principles:
- Never use floating-point arithmetic for currency calculations
- Parse through Decimal, then scale to integer milliunits
- Reject anything that is not a finite decimal number
"""

from decimal import ROUND_HALF_UP, Decimal, DecimalException, InvalidOperation
from typing import Union

MILLIUNITS_PER_UNIT = 1000

# Signed 64-bit range; sums outside it are rejected rather than wrapped.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

AmountLike = Union[Decimal, int, float, str]


def to_decimal(value: AmountLike) -> Decimal:
    """
    Convert a heterogeneous amount into a finite Decimal.

    Strings may carry a leading "$" and thousands separators.

    Args:
        value: Decimal, int, float or string amount in currency units

    Returns:
        Finite Decimal value

    Raises:
        ValueError: If the value is not a finite decimal number

    Examples:
        to_decimal("$1,234.56") -> Decimal("1234.56")
        to_decimal("-12.5") -> Decimal("-12.5")
    """
    # bool is an int subclass but never a meaningful amount
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Not a currency amount: {value!r}")

    try:
        if isinstance(value, Decimal):
            result = value
        elif isinstance(value, int):
            result = Decimal(value)
        elif isinstance(value, float):
            # repr() gives the shortest string that round-trips, so 0.1 stays 0.1
            result = Decimal(repr(value))
        elif isinstance(value, str):
            clean = value.replace("$", "").replace(",", "").strip()
            if not clean:
                raise ValueError("Empty currency amount")
            result = Decimal(clean)
        else:
            raise ValueError(f"Unsupported amount type: {type(value).__name__}")
    except InvalidOperation as e:
        raise ValueError(f"Not a currency amount: {value!r}") from e

    if not result.is_finite():
        raise ValueError(f"Currency amount must be finite: {value!r}")
    return result


def decimal_to_milliunits(amount: Decimal) -> int:
    """
    Scale a decimal currency amount to integer milliunits.

    Digits beyond the third decimal place are rounded half away from zero.

    Example:
        decimal_to_milliunits(Decimal("45.99")) -> 45990

    Raises:
        ValueError: If the exponent is too large for the decimal context
    """
    try:
        return int(amount.scaleb(3).to_integral_value(rounding=ROUND_HALF_UP))
    except DecimalException as e:
        raise ValueError(f"Currency amount out of range: {amount}") from e


def parse_milliunits(value: AmountLike) -> int:
    """
    Parse any supported amount representation to milliunits.

    Examples:
        parse_milliunits("$12.34") -> 12340
        parse_milliunits(-0.5) -> -500
        parse_milliunits(3) -> 3000
    """
    return decimal_to_milliunits(to_decimal(value))


def milliunits_to_decimal(milliunits: int) -> Decimal:
    """Convert milliunits back to an exact Decimal in currency units."""
    return Decimal(milliunits) / MILLIUNITS_PER_UNIT


def milliunits_to_dollars_str(milliunits: int) -> str:
    """
    Convert milliunits to a dollar string using integer arithmetic.

    Sub-cent milliunits are truncated toward zero for display.

    Example:
        milliunits_to_dollars_str(-45990) -> "-45.99"
    """
    is_negative = milliunits < 0
    abs_cents = abs(int(milliunits)) // 10

    dollars = abs_cents // 100
    remainder = abs_cents % 100

    if is_negative and abs_cents:
        return f"-{dollars}.{remainder:02d}"
    return f"{dollars}.{remainder:02d}"


def format_milliunits(milliunits: int) -> str:
    """Format milliunits as dollar string, sign before the $ ("-$45.99")."""
    text = milliunits_to_dollars_str(milliunits)
    if text.startswith("-"):
        return f"-${text[1:]}"
    return f"${text}"


def fits_int64(value: int) -> bool:
    """Check whether an integer is representable as a signed 64-bit value."""
    return INT64_MIN <= value <= INT64_MAX
