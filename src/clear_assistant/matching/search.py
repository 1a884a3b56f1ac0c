#!/usr/bin/env python3
"""
Subset-Sum Search Engine

Finds subsets of normalized transaction amounts that sum exactly to a
target, using a depth-first branch-and-bound over include/exclude decisions.

Key Features:
- Branch order fixed by input order (include before exclude), so results
  are reproducible for identical inputs
- Range pruning from suffix sums of the undecided negative and positive
  amounts, plus a divisibility check on the undecided suffix
- Result cap (``limit``), work budget and cooperative cancellation
- Integrity checks (duplicate ids, 64-bit overflow) before any search
"""

import logging
import threading
from collections.abc import Sequence
from math import gcd

from ..core.currency import fits_int64
from ..core.models import MatchCandidate, SearchResult, StopReason, TransactionId
from .errors import AmountOverflowError, DuplicateIdError, InvalidAmountError

logger = logging.getLogger(__name__)


def search(
    amounts: Sequence[tuple[TransactionId, int]],
    target: int,
    limit: int = 10,
    work_budget: int | None = None,
    allow_empty_match: bool = False,
    cancel_event: threading.Event | None = None,
) -> SearchResult:
    """
    Search for subsets of ``amounts`` whose sum equals ``target``.

    Args:
        amounts: (transaction id, milliunits) pairs, ids unique
        target: Signed target in milliunits
        limit: Maximum number of matches to return (>= 1)
        work_budget: Maximum number of branch nodes to visit, None for unlimited
        allow_empty_match: Report the empty selection when it sums to target
        cancel_event: Polled once per node; when set the search stops early

    Returns:
        SearchResult whose matches are ordered by input-order traversal.
        ``partial`` is True when the budget or cancellation cut the search short.

    Raises:
        ValueError: If limit or work_budget is out of range
        InvalidAmountError: If an amount or the target is not an integer
        DuplicateIdError: If an id appears more than once
        AmountOverflowError: If values or their sums leave the signed 64-bit range
    """
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")
    if work_budget is not None and work_budget < 0:
        raise ValueError(f"work_budget must be non-negative, got {work_budget}")

    ids, values = _validate_amounts(amounts, target)

    if not values:
        matches: tuple[MatchCandidate, ...] = ()
        if allow_empty_match and target == 0:
            matches = (MatchCandidate(transaction_ids=(), amounts=()),)
        return SearchResult(matches=matches)

    n = len(values)

    # Reachable offset from any node at depth i lies in [min_rest[i], max_rest[i]]
    min_rest = [0] * (n + 1)
    max_rest = [0] * (n + 1)
    gcd_rest = [0] * (n + 1)
    for i in range(n - 1, -1, -1):
        value = values[i]
        min_rest[i] = min_rest[i + 1] + min(value, 0)
        max_rest[i] = max_rest[i + 1] + max(value, 0)
        gcd_rest[i] = gcd(gcd_rest[i + 1], value)

    found: list[MatchCandidate] = []
    stop_reason = StopReason.EXHAUSTED
    visited = 0

    # (depth, partial sum, included indices)
    stack: list[tuple[int, int, tuple[int, ...]]] = [(0, 0, ())]

    while stack:
        if cancel_event is not None and cancel_event.is_set():
            stop_reason = StopReason.CANCELLED
            break
        if work_budget is not None and visited >= work_budget:
            stop_reason = StopReason.BUDGET_EXHAUSTED
            break

        depth, partial_sum, included = stack.pop()
        visited += 1

        remaining = target - partial_sum
        if remaining < min_rest[depth] or remaining > max_rest[depth]:
            continue
        divisor = gcd_rest[depth]
        if divisor and remaining % divisor:
            continue

        if depth == n:
            # Range check above guarantees partial_sum == target here
            if included or allow_empty_match:
                found.append(
                    MatchCandidate(
                        transaction_ids=tuple(ids[i] for i in included),
                        amounts=tuple(values[i] for i in included),
                    )
                )
                if len(found) >= limit:
                    stop_reason = StopReason.LIMIT_REACHED
                    break
            continue

        # Pushed in reverse so the include branch is explored first
        stack.append((depth + 1, partial_sum, included))
        stack.append((depth + 1, partial_sum + values[depth], included + (depth,)))

    partial = stop_reason in (StopReason.BUDGET_EXHAUSTED, StopReason.CANCELLED)

    logger.debug(
        "Subset search over %d amounts for target %d: %d matches, %d nodes, %s",
        n,
        target,
        len(found),
        visited,
        stop_reason.value,
    )
    if partial:
        logger.info(
            "Subset search stopped early (%s) after %d nodes with %d matches",
            stop_reason.value,
            visited,
            len(found),
        )

    return SearchResult(
        matches=tuple(found),
        partial=partial,
        stop_reason=stop_reason,
        nodes_visited=visited,
    )


def _validate_amounts(
    amounts: Sequence[tuple[TransactionId, int]], target: int
) -> tuple[list[TransactionId], list[int]]:
    """Split pairs into ids and values, enforcing uniqueness and the 64-bit range."""
    if not _is_int(target):
        raise InvalidAmountError(f"Target must be an integer number of milliunits: {target!r}")
    if not fits_int64(target):
        raise AmountOverflowError(f"Target {target} exceeds the signed 64-bit range")

    ids: list[TransactionId] = []
    values: list[int] = []
    seen: set = set()
    positive_total = 0
    negative_total = 0

    for tx_id, value in amounts:
        if tx_id in seen:
            raise DuplicateIdError(tx_id)
        seen.add(tx_id)

        if not _is_int(value):
            raise InvalidAmountError(
                f"Normalized amount must be an integer number of milliunits: {value!r}",
                transaction_id=tx_id,
            )

        if value > 0:
            positive_total += value
        else:
            negative_total += value
        if not fits_int64(positive_total) or not fits_int64(negative_total):
            raise AmountOverflowError(
                f"Cumulative amount exceeds the signed 64-bit range at transaction {tx_id!r}"
            )

        ids.append(tx_id)
        values.append(value)

    return ids, values


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
