#!/usr/bin/env python3
"""
Core Data Models for the Clear Assistant

Ledger-independent data structures shared by the normalizer, the search
engine and the assisted-clear flow.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Hashable

from .currency import AmountLike

TransactionId = Hashable


class ClearedStatus(Enum):
    """Clearing state of a ledger transaction."""

    UNCLEARED = "uncleared"
    CLEARED = "cleared"
    RECONCILED = "reconciled"


@dataclass(frozen=True)
class Transaction:
    """
    Ledger transaction as supplied by the caller.

    The amount is in currency units (not milliunits) and may be any
    decimal representation; it is only validated when normalized.
    """

    id: TransactionId
    amount: AmountLike
    cleared: ClearedStatus = ClearedStatus.UNCLEARED
    deleted: bool = False

    # Display-only metadata
    payee_name: str | None = None
    memo: str | None = None
    date: str | None = None

    @property
    def is_eligible(self) -> bool:
        """Uncleared and not tombstoned: a candidate for clearing."""
        return self.cleared == ClearedStatus.UNCLEARED and not self.deleted


class StopReason(Enum):
    """Why a subset-sum search stopped."""

    EXHAUSTED = "exhausted"  # every branch decided
    LIMIT_REACHED = "limit_reached"
    BUDGET_EXHAUSTED = "budget_exhausted"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class MatchCandidate:
    """
    Set of transactions whose normalized amounts sum exactly to the target.

    Identifiers keep input order; order carries no meaning beyond
    reproducible display.
    """

    transaction_ids: tuple[TransactionId, ...]
    amounts: tuple[int, ...]

    @property
    def total(self) -> int:
        """Sum of the included amounts in milliunits."""
        return sum(self.amounts)

    @property
    def size(self) -> int:
        return len(self.transaction_ids)

    def as_set(self) -> frozenset:
        return frozenset(self.transaction_ids)


@dataclass(frozen=True)
class SearchResult:
    """
    Outcome of a subset-sum search.

    A partial result was cut short by the work budget or cancellation and is
    not guaranteed to contain every match.
    """

    matches: tuple[MatchCandidate, ...] = field(default_factory=tuple)
    partial: bool = False
    stop_reason: StopReason = StopReason.EXHAUSTED
    nodes_visited: int = 0

    def __len__(self) -> int:
        return len(self.matches)

    def __iter__(self):
        return iter(self.matches)
