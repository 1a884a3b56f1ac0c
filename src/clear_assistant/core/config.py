#!/usr/bin/env python3
"""
Configuration Management for the Clear Assistant

Handles environment-based configuration with secure defaults and validation.
Supports multiple environments (development, test, production).
"""

import logging
import os
import tempfile
from dataclasses import dataclass, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class YNABConfig:
    """Local YNAB cache configuration."""

    cache_dir: Path


@dataclass
class SearchConfig:
    """Tuning parameters for the subset-sum search."""

    limit: int = 10
    # None means unlimited
    work_budget: int | None = 1_000_000
    allow_empty_match: bool = False


@dataclass
class Config:
    """
    Main configuration class for the clear assistant.

    Loads configuration from environment variables with defaults
    and validation for each environment type.
    """

    environment: Environment

    data_dir: Path

    ynab: YNABConfig
    search: SearchConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("CLEAR_ASSIST_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_clear_assist"
            data_dir = Path(os.getenv("CLEAR_ASSIST_DATA_DIR", str(default_test_dir)))
        else:
            data_dir = Path(os.getenv("CLEAR_ASSIST_DATA_DIR", "./data")).expanduser().resolve()

        ynab = YNABConfig(cache_dir=data_dir / "ynab" / "cache")

        work_budget = int(os.getenv("CLEAR_ASSIST_WORK_BUDGET", "1000000"))
        search = SearchConfig(
            limit=int(os.getenv("CLEAR_ASSIST_MATCH_LIMIT", "10")),
            work_budget=work_budget if work_budget != 0 else None,
            allow_empty_match=_parse_bool(os.getenv("CLEAR_ASSIST_ALLOW_EMPTY_MATCH", "false")),
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            ynab=ynab,
            search=search,
            debug=_parse_bool(os.getenv("DEBUG", "false")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if self.search.limit < 1:
            errors.append("CLEAR_ASSIST_MATCH_LIMIT must be at least 1")
        if self.search.work_budget is not None and self.search.work_budget < 0:
            errors.append("CLEAR_ASSIST_WORK_BUDGET must be non-negative (0 disables the budget)")
        if not hasattr(logging, self.log_level):
            errors.append(f"Unknown LOG_LEVEL: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a plain dictionary for display."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if is_dataclass(field_value):
                # Nested dataclass
                result[field_name] = {
                    name: str(value) if isinstance(value, Path) else value
                    for name, value in field_value.__dict__.items()
                }
            elif isinstance(field_value, Path):
                result[field_name] = str(field_value)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value

        return result


def _parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        config = Config.from_environment()

        errors = config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        config.setup_logging()
        _config = config

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
