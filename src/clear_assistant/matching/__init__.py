"""
Reconciliation Matching Package

Finds which uncleared transactions explain the difference between an
account's cleared balance and a statement balance.

Key Components:
- normalizer: Decimal amounts to integer milliunits
- search: Deterministic branch-and-bound subset-sum search
- assistant: End-to-end assisted-clear flow
"""

from .assistant import (
    ClearAssistant,
    ClearAssistantResult,
    calculate_target,
    eligible_transactions,
    find_clearing_matches,
    parse_target_balance,
)
from .errors import (
    AmountOverflowError,
    DuplicateIdError,
    InvalidAmountError,
    ReconciliationError,
)
from .normalizer import NormalizationOutcome, normalize, normalize_amount, normalize_eligible
from .search import search

__all__ = [
    "AmountOverflowError",
    "ClearAssistant",
    "ClearAssistantResult",
    "DuplicateIdError",
    "InvalidAmountError",
    "NormalizationOutcome",
    "ReconciliationError",
    "calculate_target",
    "eligible_transactions",
    "find_clearing_matches",
    "normalize",
    "normalize_amount",
    "normalize_eligible",
    "parse_target_balance",
    "search",
]
