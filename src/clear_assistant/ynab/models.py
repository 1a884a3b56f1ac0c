#!/usr/bin/env python3
"""
YNAB Domain Models

Type-safe models for the subset of the YNAB API format the clear assistant
needs. Amounts stay in milliunits via the Money primitive.
"""

from dataclasses import dataclass
from typing import Any

from ..core.models import ClearedStatus, Transaction
from ..core.money import Money


@dataclass
class YnabAccount:
    """
    YNAB account from API.

    Represents a financial account in YNAB with its balance fields.
    """

    id: str
    name: str
    type: str  # "checking", "savings", "creditCard", etc.
    on_budget: bool
    closed: bool
    balance: Money  # Current account balance
    cleared_balance: Money  # Balance of cleared transactions
    uncleared_balance: Money  # Balance of uncleared transactions
    deleted: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "YnabAccount":
        """
        Create YnabAccount from API dict.

        Args:
            data: Dictionary from YNAB API (accounts.json)

        Returns:
            YnabAccount instance
        """
        return cls(
            id=data["id"],
            name=data["name"],
            type=data.get("type", "checking"),
            on_budget=data.get("on_budget", True),
            closed=data.get("closed", False),
            balance=Money.from_milliunits(data["balance"]),
            cleared_balance=Money.from_milliunits(data["cleared_balance"]),
            uncleared_balance=Money.from_milliunits(data.get("uncleared_balance", 0)),
            deleted=data.get("deleted", False),
        )


@dataclass
class YnabTransaction:
    """
    YNAB transaction from API.

    Only the fields the clear assistant reads or displays are kept.
    """

    id: str
    date: str
    amount: Money
    cleared: str  # "cleared", "uncleared", "reconciled"
    account_id: str
    account_name: str | None = None
    payee_name: str | None = None
    memo: str | None = None
    approved: bool = True
    deleted: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "YnabTransaction":
        """
        Create YnabTransaction from API dict.

        Args:
            data: Dictionary from YNAB API (transactions.json)

        Returns:
            YnabTransaction instance
        """
        return cls(
            id=data["id"],
            date=data["date"],
            amount=Money.from_milliunits(data["amount"]),
            cleared=data.get("cleared", "uncleared"),  # Default to uncleared if not present
            account_id=data.get("account_id", "unknown"),
            account_name=data.get("account_name"),
            payee_name=data.get("payee_name"),
            memo=data.get("memo"),
            approved=data.get("approved", True),
            deleted=data.get("deleted", False),
        )

    def to_transaction(self) -> Transaction:
        """Convert to the ledger-independent Transaction used by the matcher."""
        return Transaction(
            id=self.id,
            amount=self.amount.to_decimal(),
            cleared=ClearedStatus(self.cleared),
            deleted=self.deleted,
            payee_name=self.payee_name,
            memo=self.memo,
            date=self.date,
        )
