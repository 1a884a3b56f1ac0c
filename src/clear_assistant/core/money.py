#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer milliunits internally,
the same fixed-point scale the YNAB ledger uses.
"""

from dataclasses import dataclass
from decimal import Decimal

from .currency import (
    AmountLike,
    format_milliunits,
    milliunits_to_decimal,
    parse_milliunits,
)


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in milliunits.

    Supports both positive (inflows) and negative (outflows) amounts.

    Examples:
        >>> balance = Money.from_decimal("123.45")
        >>> balance.to_milliunits()
        123450

        >>> cleared = Money.from_milliunits(-45990)
        >>> str(balance - cleared)
        '$169.44'
    """

    milliunits: int

    @classmethod
    def from_milliunits(cls, milliunits: int) -> "Money":
        """Create Money from YNAB milliunits (1000 = $1.00)."""
        return cls(milliunits=milliunits)

    @classmethod
    def from_decimal(cls, amount: AmountLike) -> "Money":
        """
        Parse from a decimal amount in currency units.

        Args:
            amount: String like "$12.34", Decimal, int or float

        Returns:
            Money object

        Raises:
            ValueError: If the amount is not a finite decimal number
        """
        return cls(milliunits=parse_milliunits(amount))

    def to_milliunits(self) -> int:
        """Get value in YNAB milliunits."""
        return self.milliunits

    def to_decimal(self) -> Decimal:
        """Get exact value in currency units as a Decimal."""
        return milliunits_to_decimal(self.milliunits)

    def abs(self) -> "Money":
        """Return absolute value of Money."""
        return Money(milliunits=abs(self.milliunits))

    def __add__(self, other: "Money") -> "Money":
        return Money(milliunits=self.milliunits + other.milliunits)

    def __sub__(self, other: "Money") -> "Money":
        return Money(milliunits=self.milliunits - other.milliunits)

    def __neg__(self) -> "Money":
        return Money(milliunits=-self.milliunits)

    def __lt__(self, other: "Money") -> bool:
        return self.milliunits < other.milliunits

    def __le__(self, other: "Money") -> bool:
        return self.milliunits <= other.milliunits

    def __gt__(self, other: "Money") -> bool:
        return self.milliunits > other.milliunits

    def __ge__(self, other: "Money") -> bool:
        return self.milliunits >= other.milliunits

    def __str__(self) -> str:
        """Format as dollar string."""
        return format_milliunits(self.milliunits)

    def __repr__(self) -> str:
        return f"Money(milliunits={self.milliunits})"
