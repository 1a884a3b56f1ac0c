#!/usr/bin/env python3
"""
Assisted Clear

Given the balance shown on a bank statement, find which uncleared
transactions would bring the account's cleared balance to that value.

Flow:
1. Parse the desired balance entered by the user
2. Keep only uncleared, non-deleted transactions
3. Compute the milliunit target: desired * 1000 - cleared balance
4. Normalize amounts, dropping malformed ones
5. Run the subset-sum search and map ids back to transactions
"""

import logging
import threading
from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal

from ..core.config import SearchConfig
from ..core.currency import AmountLike, decimal_to_milliunits, fits_int64, to_decimal
from ..core.models import MatchCandidate, StopReason, Transaction, TransactionId
from ..core.money import Money
from .errors import AmountOverflowError, DuplicateIdError, InvalidAmountError
from .normalizer import normalize_eligible
from .search import search

logger = logging.getLogger(__name__)


def parse_target_balance(text: AmountLike) -> Decimal:
    """
    Parse the balance entered by the user.

    Examples:
        parse_target_balance("1,234.56") -> Decimal("1234.56")
        parse_target_balance("123.abc") -> InvalidAmountError

    Raises:
        InvalidAmountError: If the input is empty or not a finite number
    """
    try:
        return to_decimal(text)
    except ValueError as e:
        raise InvalidAmountError(f"Invalid target balance {text!r}: {e}") from e


def eligible_transactions(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Filter to transactions that can still be cleared."""
    return [tx for tx in transactions if tx.is_eligible]


def _check_unique_ids(transactions: list[Transaction]) -> None:
    # Covers transactions later dropped for malformed amounts too
    seen: set[TransactionId] = set()
    for tx in transactions:
        if tx.id in seen:
            raise DuplicateIdError(tx.id)
        seen.add(tx.id)


def calculate_target(desired_balance: AmountLike, cleared_balance: int) -> int:
    """
    Compute the milliunit amount that still has to be cleared.

    Args:
        desired_balance: Balance the account should show once cleared
        cleared_balance: Current cleared balance in milliunits

    Returns:
        Target in milliunits

    Raises:
        InvalidAmountError: If the desired balance is malformed
        AmountOverflowError: If the target leaves the signed 64-bit range
    """
    desired = parse_target_balance(desired_balance)
    try:
        desired_milliunits = decimal_to_milliunits(desired)
    except ValueError as e:
        raise AmountOverflowError(f"Target balance {desired_balance!r} is out of range") from e
    target = desired_milliunits - cleared_balance
    if not fits_int64(target):
        raise AmountOverflowError(f"Target {target} exceeds the signed 64-bit range")
    return target


@dataclass
class ClearAssistantResult:
    """Matches found for one assisted-clear request."""

    target: int
    cleared_balance: int
    matches: list[list[Transaction]] = field(default_factory=list)
    rejected_ids: list[TransactionId] = field(default_factory=list)
    partial: bool = False
    stop_reason: StopReason = StopReason.EXHAUSTED
    eligible_count: int = 0
    nodes_visited: int = 0

    @property
    def target_money(self) -> Money:
        return Money.from_milliunits(self.target)

    @property
    def cleared_money(self) -> Money:
        return Money.from_milliunits(self.cleared_balance)

    @property
    def has_matches(self) -> bool:
        return bool(self.matches)


class ClearAssistant:
    """
    Runs assisted-clear searches with a fixed search configuration.

    Holds no state between calls; a single instance may be shared across
    threads.
    """

    def __init__(self, search_config: SearchConfig | None = None):
        self.search_config = search_config or SearchConfig()

    def find_matches(
        self,
        transactions: Iterable[Transaction],
        desired_balance: AmountLike,
        cleared_balance: int,
        cancel_event: threading.Event | None = None,
    ) -> ClearAssistantResult:
        """
        Find subsets of uncleared transactions that reach the desired balance.

        Args:
            transactions: All transactions of the account; ineligible ones are skipped
            desired_balance: Statement balance in currency units
            cleared_balance: Current cleared balance in milliunits
            cancel_event: Optional event that aborts the search when set

        Returns:
            ClearAssistantResult with matching transaction lists

        Raises:
            InvalidAmountError: If the desired balance is malformed
            DuplicateIdError: If two eligible transactions share an id
            AmountOverflowError: If amounts leave the signed 64-bit range
        """
        target = calculate_target(desired_balance, cleared_balance)
        candidates = eligible_transactions(transactions)
        _check_unique_ids(candidates)
        outcome = normalize_eligible(candidates)

        logger.info(
            "Searching %d uncleared transactions for target %s",
            len(outcome.amounts),
            Money.from_milliunits(target),
        )

        result = search(
            outcome.amounts,
            target,
            limit=self.search_config.limit,
            work_budget=self.search_config.work_budget,
            allow_empty_match=self.search_config.allow_empty_match,
            cancel_event=cancel_event,
        )

        rejected = set(outcome.rejected_ids)
        by_id = {tx.id: tx for tx in candidates if tx.id not in rejected}
        return ClearAssistantResult(
            target=target,
            cleared_balance=cleared_balance,
            matches=[self._resolve(match, by_id) for match in result.matches],
            rejected_ids=outcome.rejected_ids,
            partial=result.partial,
            stop_reason=result.stop_reason,
            eligible_count=len(candidates),
            nodes_visited=result.nodes_visited,
        )

    @staticmethod
    def _resolve(match: MatchCandidate, by_id: dict[TransactionId, Transaction]) -> list[Transaction]:
        return [by_id[tx_id] for tx_id in match.transaction_ids]


def find_clearing_matches(
    transactions: Iterable[Transaction],
    desired_balance: AmountLike,
    cleared_balance: int,
    search_config: SearchConfig | None = None,
) -> ClearAssistantResult:
    """Convenience wrapper around ``ClearAssistant.find_matches``."""
    return ClearAssistant(search_config).find_matches(transactions, desired_balance, cleared_balance)

