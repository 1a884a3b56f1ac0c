#!/usr/bin/env python3
"""
Amount Normalizer

Converts transaction amounts given in currency units into signed integer
milliunits (``round(amount * 1000)``), the ledger's fixed-point convention.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from ..core.currency import AmountLike, parse_milliunits
from ..core.models import Transaction, TransactionId
from .errors import InvalidAmountError

logger = logging.getLogger(__name__)

NormalizedAmounts = list[tuple[TransactionId, int]]


def normalize_amount(value: AmountLike, transaction_id: TransactionId | None = None) -> int:
    """
    Convert a single amount to milliunits.

    Args:
        value: Decimal, int, float or string amount in currency units
        transaction_id: Optional id reported with the error

    Returns:
        Amount in milliunits

    Raises:
        InvalidAmountError: If the amount is not a finite decimal number
    """
    try:
        return parse_milliunits(value)
    except ValueError as e:
        raise InvalidAmountError(str(e), transaction_id=transaction_id) from e


def normalize(transactions: Iterable[Transaction]) -> NormalizedAmounts:
    """
    Normalize every transaction amount, preserving length and order.

    Fails on the first malformed amount; use ``normalize_eligible`` to drop
    malformed transactions instead.

    Raises:
        InvalidAmountError: If any amount cannot be parsed
    """
    return [(tx.id, normalize_amount(tx.amount, tx.id)) for tx in transactions]


@dataclass
class NormalizationOutcome:
    """Normalized amounts plus the ids of transactions that were dropped."""

    amounts: NormalizedAmounts = field(default_factory=list)
    rejected_ids: list[TransactionId] = field(default_factory=list)


def normalize_eligible(transactions: Iterable[Transaction]) -> NormalizationOutcome:
    """
    Normalize amounts, dropping transactions whose amount is malformed.

    A single malformed transaction should not block reconciliation, so each
    failure is logged and the transaction left out of the search.
    """
    outcome = NormalizationOutcome()

    for tx in transactions:
        try:
            outcome.amounts.append((tx.id, normalize_amount(tx.amount, tx.id)))
        except InvalidAmountError as e:
            logger.warning("Dropping transaction %s with invalid amount: %s", tx.id, e)
            outcome.rejected_ids.append(tx.id)

    return outcome
