#!/usr/bin/env python3
"""
YNAB Data Loader

Utilities for loading cached YNAB data (accounts, transactions) from local
JSON files.

Functions:
- load_transactions: Load transactions as domain models
- load_accounts: Load accounts as domain models
- find_account: Look up an account by name or id
- transactions_for_account: Filter transactions to one account
"""

import json
import logging
from pathlib import Path
from typing import Any

from ..core.config import get_config
from .models import YnabAccount, YnabTransaction

logger = logging.getLogger(__name__)


def _resolve_cache_dir(cache_dir: str | Path | None) -> Path:
    if cache_dir is None:
        return get_config().ynab.cache_dir
    return Path(cache_dir)


def _load_records(cache_file: Path, key: str) -> list[dict[str, Any]]:
    """Read a cache file in either wrapped-object or bare-list format."""
    if not cache_file.exists():
        raise FileNotFoundError(f"YNAB {key} cache not found: {cache_file}")

    with open(cache_file) as f:
        data: Any = json.load(f)

    if isinstance(data, dict):
        records: list[dict[str, Any]] = data.get(key, [])
    elif isinstance(data, list):
        records = data
    else:
        records = []

    logger.debug("Loaded %d %s from %s", len(records), key, cache_file)
    return records


def load_transactions(cache_dir: str | Path | None = None) -> list[YnabTransaction]:
    """
    Load YNAB transactions from cache as domain models.

    Args:
        cache_dir: Directory containing cached YNAB data.
                   If None, uses config.data_dir/ynab/cache

    Returns:
        List of YnabTransaction domain models

    Raises:
        FileNotFoundError: If cache directory or transactions file not found
    """
    records = _load_records(_resolve_cache_dir(cache_dir) / "transactions.json", "transactions")
    return [YnabTransaction.from_dict(tx) for tx in records]


def load_accounts(cache_dir: str | Path | None = None) -> list[YnabAccount]:
    """
    Load YNAB accounts from cache as domain models.

    Args:
        cache_dir: Directory containing cached YNAB data.
                   If None, uses config.data_dir/ynab/cache

    Returns:
        List of YnabAccount domain models

    Raises:
        FileNotFoundError: If cache directory or accounts file not found
    """
    records = _load_records(_resolve_cache_dir(cache_dir) / "accounts.json", "accounts")
    return [YnabAccount.from_dict(acct) for acct in records]


def find_account(accounts: list[YnabAccount], name_or_id: str) -> YnabAccount | None:
    """
    Find a non-deleted account by id or case-insensitive name.

    Closed accounts are still matched. Ids take precedence over names.
    """
    live = [acct for acct in accounts if not acct.deleted]
    for acct in live:
        if acct.id == name_or_id:
            return acct
    wanted = name_or_id.strip().lower()
    for acct in live:
        if acct.name.lower() == wanted:
            return acct
    return None


def transactions_for_account(transactions: list[YnabTransaction], account_id: str) -> list[YnabTransaction]:
    """Filter transactions to those belonging to ``account_id``."""
    return [tx for tx in transactions if tx.account_id == account_id]
