#!/usr/bin/env python3
"""
Main CLI Entry Point for the Clear Assistant

Provides a command-line interface for finding which uncleared YNAB
transactions reconcile an account to a statement balance.
"""

import dataclasses
import logging
import os
from pathlib import Path

import click

from ..core.config import get_config, reload_config
from ..core.currency import format_milliunits, parse_milliunits
from ..matching import ClearAssistant, ReconciliationError
from ..ynab.loader import find_account, load_accounts, load_transactions, transactions_for_account


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    YNAB Clear Assistant

    Finds the uncleared transactions that bring an account's cleared
    balance to the balance shown on a bank statement.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["CLEAR_ASSIST_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"

    try:
        config = reload_config() if (config_env or debug) else get_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("clear_assistant").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        click.echo(f"Data directory: {config.data_dir}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from clear_assistant import __author__, __version__

    click.echo(f"YNAB Clear Assistant v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]
    work_budget = config_obj.search.work_budget

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  YNAB Cache: {config_obj.ynab.cache_dir}")
    click.echo(f"  Match Limit: {config_obj.search.limit}")
    click.echo(f"  Work Budget: {work_budget if work_budget is not None else 'unlimited'}")
    click.echo(f"  Allow Empty Match: {config_obj.search.allow_empty_match}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


@main.command()
@click.argument("account")
@click.argument("balance")
@click.option("--limit", type=click.IntRange(min=1), help="Maximum number of matches to show")
@click.option(
    "--work-budget",
    type=click.IntRange(min=0),
    help="Maximum search steps before giving up (0 = unlimited)",
)
@click.option("--allow-empty", is_flag=True, help="Report an empty selection when it matches")
@click.option(
    "--cache-dir",
    type=click.Path(file_okay=False, path_type=Path),
    help="YNAB cache directory (default: <data dir>/ynab/cache)",
)
@click.pass_context
def match(
    ctx: click.Context,
    account: str,
    balance: str,
    limit: int | None,
    work_budget: int | None,
    allow_empty: bool,
    cache_dir: Path | None,
) -> None:
    """
    Find uncleared transactions that reconcile ACCOUNT to BALANCE.

    ACCOUNT is an account name or id from the YNAB cache; BALANCE is the
    statement balance in dollars. Use "--" before negative balances.

    Examples:
      clear-assist match Checking 1234.56
      clear-assist match "Chase Visa" --limit 3 -- -250.00
    """
    config_obj = ctx.obj["config"]
    verbose = ctx.obj.get("verbose", False)

    search_config = config_obj.search
    overrides = {}
    if limit is not None:
        overrides["limit"] = limit
    if work_budget is not None:
        overrides["work_budget"] = work_budget or None
    if allow_empty:
        overrides["allow_empty_match"] = True
    if overrides:
        search_config = dataclasses.replace(search_config, **overrides)

    cache_path = cache_dir or config_obj.ynab.cache_dir
    try:
        accounts = load_accounts(cache_path)
        ynab_transactions = load_transactions(cache_path)
    except FileNotFoundError as e:
        raise click.ClickException(str(e)) from e

    ynab_account = find_account(accounts, account)
    if ynab_account is None:
        raise click.ClickException(f"Account not found in YNAB cache: {account}")

    transactions = [tx.to_transaction() for tx in transactions_for_account(ynab_transactions, ynab_account.id)]

    try:
        result = ClearAssistant(search_config).find_matches(
            transactions,
            balance,
            ynab_account.cleared_balance.to_milliunits(),
        )
    except ReconciliationError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Account: {ynab_account.name}")
    click.echo(f"Cleared Balance: {result.cleared_money}")
    click.echo(f"Amount to Clear: {result.target_money}")
    if verbose:
        click.echo(f"Uncleared transactions searched: {result.eligible_count}")
        click.echo(f"Search steps: {result.nodes_visited}")

    for tx_id in result.rejected_ids:
        click.echo(f"Skipped transaction with invalid amount: {tx_id}", err=True)

    if result.partial:
        click.echo(
            f"WARNING: search was capped ({result.stop_reason.value}); "
            "these are the best matches found so far, not all possible matches."
        )

    if not result.has_matches:
        click.echo("No combination of uncleared transactions matches that balance.")
        return

    click.echo("=" * 60)
    for index, transactions_in_match in enumerate(result.matches, start=1):
        click.echo(f"\nMatch {index} ({len(transactions_in_match)} transactions):")
        if not transactions_in_match:
            click.echo("  (no transactions need clearing)")
        for tx in transactions_in_match:
            amount = format_milliunits(parse_milliunits(tx.amount))
            payee = tx.payee_name or "(no payee)"
            click.echo(f"  {tx.date or '':<10}  {payee:<30}  {amount:>12}  [{tx.id}]")


if __name__ == "__main__":
    main()
