"""
Core Utilities Package

Shared primitives used by the matching engine, the YNAB cache loader and
the CLI.

This package provides:
- Currency handling with integer milliunit arithmetic
- Ledger-independent transaction and search-result models
- Configuration management for environment-specific settings
"""

from .config import (
    Config,
    Environment,
    SearchConfig,
    get_config,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .currency import (
    format_milliunits,
    milliunits_to_decimal,
    milliunits_to_dollars_str,
    parse_milliunits,
    to_decimal,
)
from .models import (
    ClearedStatus,
    MatchCandidate,
    SearchResult,
    StopReason,
    Transaction,
)
from .money import Money

__all__ = [
    "ClearedStatus",
    # Configuration
    "Config",
    "Environment",
    "MatchCandidate",
    "Money",
    "SearchConfig",
    "SearchResult",
    "StopReason",
    # Data models
    "Transaction",
    # Currency utilities
    "format_milliunits",
    "get_config",
    "is_development",
    "is_production",
    "is_test",
    "milliunits_to_decimal",
    "milliunits_to_dollars_str",
    "parse_milliunits",
    "reload_config",
    "to_decimal",
]
