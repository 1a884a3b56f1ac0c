"""
YNAB Integration Package

Reads the locally cached YNAB export that the clear assistant works from.

Key Components:
- models: Account and transaction models in the YNAB API shape
- loader: Cache loading and account/transaction lookup
"""

from .loader import (
    find_account,
    load_accounts,
    load_transactions,
    transactions_for_account,
)
from .models import YnabAccount, YnabTransaction

__all__ = [
    "YnabAccount",
    "YnabTransaction",
    "find_account",
    "load_accounts",
    "load_transactions",
    "transactions_for_account",
]
