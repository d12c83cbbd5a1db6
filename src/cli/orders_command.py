"""Orders command wiring for recordsieve CLI."""

from __future__ import annotations

import argparse
from typing import Any

from core.config import min_order_total_from_env
from core.constants import ANY_CHOICE
from core.types import Order, OrderStatus
from filtering.criteria import OrderCriteria
from filtering.engine import filter_records
from records.record_file import load_orders
from records.samples import sample_orders


def add_orders_command(subparsers: Any) -> None:
    """Register orders subcommand."""
    parser = subparsers.add_parser("orders", help="List orders above a total threshold")
    parser.add_argument(
        "--min-total",
        help="Exclusive total threshold; defaults to SIEVE_MIN_ORDER_TOTAL",
    )
    parser.add_argument(
        "--status",
        default=OrderStatus.COMPLETED.value,
        help="Status to match (Pending, Completed, Cancelled) or 'any'",
    )
    parser.add_argument("--records", help="Optional YAML order file; built-in sample if omitted")


def run_orders_command(args: argparse.Namespace) -> int:
    """Print orders matching the requested threshold and status.

    Args:
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    min_total = args.min_total if args.min_total is not None else min_order_total_from_env()
    status = None if args.status.strip().lower() == ANY_CHOICE else args.status
    criteria = OrderCriteria(min_total=min_total, status=status)
    orders = load_orders(args.records) if args.records else sample_orders()
    for order in filter_records(orders, criteria):
        print(format_order(order))
    return 0


def format_order(order: Order) -> str:
    return (
        f"Order ID: {order.order_id}, "
        f"Total Amount: {order.total_amount}, "
        f"Status: {order.status.value}"
    )
