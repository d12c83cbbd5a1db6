"""Recordsieve CLI entry points.
This module exposes one subcommand per record type.
It maps argparse commands onto criteria sets and the filter engine.
"""

from __future__ import annotations

import argparse
from typing import Sequence

from cli.orders_command import add_orders_command, run_orders_command
from cli.products_command import add_products_command, run_products_command
from cli.users_command import add_users_command, run_users_command
from core.config import log_level_from_env, parse_log_level
from core.errors import SieveError
from core.logging_config import configure_logging, get_logger

_LOGGER = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="recordsieve",
        description="Filter user, order, and product records",
    )
    parser.add_argument("--log-level", help="Override SIEVE_LOG_LEVEL for this command")
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_users_command(subparsers)
    add_orders_command(subparsers)
    add_products_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the recordsieve CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        configure_logging(_resolve_log_level(args.log_level))
        return _dispatch(parser, args)
    except SieveError as error:
        _LOGGER.error("command_failed", command=args.command, error=str(error))
        print(f"error={error}")
        return 1


def _resolve_log_level(flag_value: str | None) -> str:
    if flag_value:
        return parse_log_level(flag_value)
    return log_level_from_env()


def _dispatch(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    if args.command == "users":
        return run_users_command(args)
    if args.command == "orders":
        return run_orders_command(args)
    if args.command == "products":
        return run_products_command(args)
    parser.error(f"Unsupported command: {args.command}")
    return 2
