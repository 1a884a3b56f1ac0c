"""
YNAB Clear Assistant

Finds which uncleared transactions, once cleared, bring a YNAB account's
cleared balance to the balance on a bank statement.

Domain Packages:
- core: Currency handling, data models, configuration
- matching: Amount normalization, subset-sum search, assisted-clear flow
- ynab: Cached YNAB accounts and transactions
- cli: Command-line interface

Example Usage:
    from clear_assistant import Transaction, find_clearing_matches

    result = find_clearing_matches(transactions, "1234.56", cleared_balance=1_000_000)
"""

__version__ = "0.1.0"
__author__ = "Karl Davis"

from .core.config import Environment, get_config
from .core.models import ClearedStatus, MatchCandidate, SearchResult, StopReason, Transaction
from .matching import (
    AmountOverflowError,
    ClearAssistant,
    DuplicateIdError,
    InvalidAmountError,
    ReconciliationError,
    find_clearing_matches,
    normalize,
    search,
)

__all__ = [
    "AmountOverflowError",
    "ClearAssistant",
    "ClearedStatus",
    "DuplicateIdError",
    "Environment",
    "InvalidAmountError",
    "MatchCandidate",
    "ReconciliationError",
    "SearchResult",
    "StopReason",
    "Transaction",
    "find_clearing_matches",
    "get_config",
    "normalize",
    "search",
]
