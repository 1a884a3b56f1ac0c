#!/usr/bin/env python3
"""Tests for YNAB domain models."""

from decimal import Decimal

import pytest

from clear_assistant.core.models import ClearedStatus
from clear_assistant.core.money import Money
from clear_assistant.ynab import YnabAccount, YnabTransaction


class TestYnabAccount:
    """Test account parsing from API dicts."""

    @pytest.mark.ynab
    def test_from_dict(self, ynab_cache_records):
        account = YnabAccount.from_dict(ynab_cache_records["accounts"][0])

        assert account.id == "acct-checking"
        assert account.name == "Checking"
        assert account.cleared_balance == Money.from_milliunits(1_000_000)
        assert account.balance == Money.from_milliunits(1_402_550)
        assert account.deleted is False

    @pytest.mark.ynab
    def test_minimal_dict_uses_defaults(self):
        account = YnabAccount.from_dict({"id": "a", "name": "Cash", "balance": 0, "cleared_balance": 0})

        assert account.type == "checking"
        assert account.on_budget is True
        assert account.uncleared_balance == Money.from_milliunits(0)


class TestYnabTransaction:
    """Test transaction parsing and conversion."""

    @pytest.mark.ynab
    def test_from_dict(self, ynab_cache_records):
        tx = YnabTransaction.from_dict(ynab_cache_records["transactions"][0])

        assert tx.id == "t1"
        assert tx.amount.to_milliunits() == -54_200
        assert tx.cleared == "uncleared"
        assert tx.payee_name == "Trader Joe's"

    @pytest.mark.ynab
    def test_cleared_defaults_to_uncleared(self):
        tx = YnabTransaction.from_dict({"id": "t", "date": "2024-01-01", "amount": 1000})

        assert tx.cleared == "uncleared"
        assert tx.account_id == "unknown"

    @pytest.mark.ynab
    def test_to_transaction_keeps_milliunit_precision(self):
        tx = YnabTransaction.from_dict(
            {"id": "t", "date": "2024-01-01", "amount": -12_345, "cleared": "reconciled", "deleted": True}
        )

        core = tx.to_transaction()

        assert core.id == "t"
        assert core.amount == Decimal("-12.345")
        assert core.cleared == ClearedStatus.RECONCILED
        assert core.deleted is True
        assert core.is_eligible is False
