"""Products command wiring for recordsieve CLI."""

from __future__ import annotations

import argparse
from typing import Any

from core.types import Product
from filtering.criteria import ProductCriteria
from filtering.engine import filter_records
from records.record_file import load_products
from records.samples import sample_products


def add_products_command(subparsers: Any) -> None:
    """Register products subcommand."""
    parser = subparsers.add_parser("products", help="Search products")
    parser.add_argument("--search", help="Case-sensitive name fragment")
    parser.add_argument("--category", help="Exact category label")
    parser.add_argument("--min-price", help="Inclusive minimum price")
    parser.add_argument(
        "--records",
        help="Optional YAML product file; built-in sample if omitted",
    )


def run_products_command(args: argparse.Namespace) -> int:
    """Print products matching every supplied search option."""
    criteria = ProductCriteria(
        search_term=args.search,
        category=args.category,
        min_price=args.min_price,
    )
    products = load_products(args.records) if args.records else sample_products()
    for product in filter_records(products, criteria):
        print(format_product(product))
    return 0


def format_product(product: Product) -> str:
    return f"Name : {product.name} | Category : {product.category} | Price : {product.price}"
