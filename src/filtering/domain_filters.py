"""Ready-made queries over the three record types."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from core.types import Order, OrderStatus, Product, User
from filtering.criteria import OrderCriteria, ProductCriteria, UserCriteria
from filtering.engine import filter_records


def active_users(users: Iterable[User]) -> list[User]:
    """Return users whose account is active."""
    return filter_records(users, UserCriteria(active=True))


def high_value_orders(orders: Iterable[Order], min_value: Decimal) -> list[Order]:
    """Return completed orders with a total strictly above ``min_value``.

    Args:
        orders: Orders to scan.
        min_value: Exclusive threshold; an order equal to it is excluded.

    Returns:
        Matching orders in input order.
    """
    criteria = OrderCriteria(min_total=min_value, status=OrderStatus.COMPLETED)
    return filter_records(orders, criteria)


def search_products(
    products: Iterable[Product],
    search_term: str | None = None,
    category: str | None = None,
    min_price: Decimal | None = None,
) -> list[Product]:
    """Search products by name fragment, category, and minimum price.

    Blank or missing arguments are ignored.

    Args:
        products: Catalog to search.
        search_term: Case-sensitive substring of the product name.
        category: Exact category label.
        min_price: Inclusive price floor.

    Returns:
        Matching products in input order.
    """
    criteria = ProductCriteria(search_term=search_term, category=category, min_price=min_price)
    return filter_records(products, criteria)
