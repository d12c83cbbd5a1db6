"""Integration tests for the public SDK surface."""

from __future__ import annotations

from decimal import Decimal

import pytest

import recordsieve
from fixture_paths import record_fixture


def test_sdk_filters_sample_orders_end_to_end() -> None:
    """SDK criteria and engine should reproduce the high-value order query."""
    criteria = recordsieve.OrderCriteria(min_total="1000", status="Completed")

    orders = recordsieve.filter_records(recordsieve.sample_orders(), criteria)

    assert [order.order_id for order in orders] == [2, 4]


def test_sdk_filters_loaded_products_end_to_end() -> None:
    """Loaded product files should filter with inclusive price bounds."""
    products = recordsieve.load_products(record_fixture("products.yaml"))

    matched = recordsieve.search_products(products, search_term="TV", min_price=Decimal("80"))

    assert [product.name for product in matched] == ["Smart TV"]


def test_sdk_errors_share_one_base_class() -> None:
    with pytest.raises(recordsieve.SieveError):
        recordsieve.ProductCriteria(min_price="-1")
