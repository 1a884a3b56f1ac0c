#!/usr/bin/env python3
"""
Reconciliation error taxonomy.

Budget exhaustion is not an error; it is reported through
``SearchResult.partial``.
"""


class ReconciliationError(ValueError):
    """Base class for errors raised while preparing or running a search."""

    pass


class InvalidAmountError(ReconciliationError):
    """Raised when an amount cannot be parsed as a finite decimal number."""

    def __init__(self, message: str, transaction_id=None):
        super().__init__(message)
        self.transaction_id = transaction_id


class DuplicateIdError(ReconciliationError):
    """Raised when the same transaction identifier appears more than once."""

    def __init__(self, transaction_id):
        super().__init__(f"Duplicate transaction id: {transaction_id!r}")
        self.transaction_id = transaction_id


class AmountOverflowError(ReconciliationError):
    """Raised when amounts or their cumulative sums exceed the signed 64-bit range."""

    pass
