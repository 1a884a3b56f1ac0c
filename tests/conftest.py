"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import json
from pathlib import Path
from typing import Any

import pytest

from clear_assistant.core import config as config_module
from clear_assistant.core.models import ClearedStatus, Transaction


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    """Uncleared checking-account transactions in currency units."""
    return [
        Transaction(id="tx-grocery", amount="-54.20", payee_name="Trader Joe's", date="2024-08-01"),
        Transaction(id="tx-paycheck", amount="1500.00", payee_name="Employer Inc", date="2024-08-02"),
        Transaction(id="tx-gas", amount="-38.75", payee_name="Shell", date="2024-08-03"),
        Transaction(id="tx-coffee", amount="-4.50", payee_name="Blue Bottle", date="2024-08-04"),
    ]


@pytest.fixture
def ynab_cache_records() -> dict[str, Any]:
    """Accounts and transactions in the YNAB API JSON shape."""
    return {
        "accounts": [
            {
                "id": "acct-checking",
                "name": "Checking",
                "type": "checking",
                "on_budget": True,
                "closed": False,
                "balance": 1_402_550,
                "cleared_balance": 1_000_000,
                "uncleared_balance": 402_550,
            },
            {
                "id": "acct-visa",
                "name": "Chase Visa",
                "type": "creditCard",
                "on_budget": True,
                "closed": False,
                "balance": -250_000,
                "cleared_balance": -200_000,
                "uncleared_balance": -50_000,
            },
        ],
        "transactions": [
            {
                "id": "t1",
                "date": "2024-08-01",
                "amount": -54_200,
                "cleared": "uncleared",
                "account_id": "acct-checking",
                "payee_name": "Trader Joe's",
            },
            {
                "id": "t2",
                "date": "2024-08-02",
                "amount": 500_000,
                "cleared": "uncleared",
                "account_id": "acct-checking",
                "payee_name": "Employer Inc",
            },
            {
                "id": "t3",
                "date": "2024-08-03",
                "amount": -43_250,
                "cleared": "uncleared",
                "account_id": "acct-checking",
                "payee_name": "Shell",
            },
            {
                "id": "t4",
                "date": "2024-07-28",
                "amount": -20_000,
                "cleared": "cleared",
                "account_id": "acct-checking",
                "payee_name": "Already Cleared",
            },
            {
                "id": "t5",
                "date": "2024-08-04",
                "amount": -99_000,
                "cleared": "uncleared",
                "account_id": "acct-checking",
                "payee_name": "Deleted Purchase",
                "deleted": True,
            },
            {
                "id": "t6",
                "date": "2024-08-05",
                "amount": -50_000,
                "cleared": "uncleared",
                "account_id": "acct-visa",
                "payee_name": "Amazon",
            },
        ],
    }


@pytest.fixture
def ynab_cache_dir(tmp_path: Path, ynab_cache_records: dict[str, Any]) -> Path:
    """Write a YNAB cache (accounts.json, transactions.json) to a temp directory."""
    cache_dir = tmp_path / "ynab" / "cache"
    cache_dir.mkdir(parents=True)
    with open(cache_dir / "accounts.json", "w") as f:
        json.dump({"accounts": ynab_cache_records["accounts"]}, f)
    with open(cache_dir / "transactions.json", "w") as f:
        json.dump(ynab_cache_records["transactions"], f)
    return cache_dir


@pytest.fixture
def uncleared():
    """Factory for eligible transactions with compact arguments."""

    def _make(tx_id: str, amount, cleared: ClearedStatus = ClearedStatus.UNCLEARED, deleted: bool = False):
        return Transaction(id=tx_id, amount=amount, cleared=cleared, deleted=deleted)

    return _make


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Set up test environment variables and reset the cached configuration."""
    monkeypatch.setenv("CLEAR_ASSIST_ENV", "test")
    monkeypatch.setenv("CLEAR_ASSIST_DATA_DIR", str(tmp_path / "data"))
    for name in (
        "CLEAR_ASSIST_MATCH_LIMIT",
        "CLEAR_ASSIST_WORK_BUDGET",
        "CLEAR_ASSIST_ALLOW_EMPTY_MATCH",
        "DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "matching: Tests for the subset-sum matching engine")
    config.addinivalue_line("markers", "ynab: Tests for YNAB cache integration")
    config.addinivalue_line("markers", "slow: Tests that take significant time to run")
    config.addinivalue_line("markers", "performance: Timing tests with realistic data volumes")
