"""Built-in sample collections.

Each factory returns a fresh list so callers never share mutable state.
"""

from __future__ import annotations

from core.types import Order, OrderStatus, Product, User
from records.record_ids import ensure_unique_ids


def sample_users() -> list[User]:
    """Return five users alternating between active and inactive."""
    users = [
        User(1, "Alice", True),
        User(2, "Bob", False),
        User(3, "Charlie", True),
        User(4, "David", False),
        User(5, "Eve", True),
    ]
    ensure_unique_ids(users, _user_id, "user")
    return users


def sample_orders() -> list[Order]:
    """Return five orders across every status."""
    orders = [
        Order(1, 500, OrderStatus.COMPLETED),
        Order(2, 1500, OrderStatus.COMPLETED),
        Order(3, 750, OrderStatus.PENDING),
        Order(4, 1200, OrderStatus.COMPLETED),
        Order(5, 300, OrderStatus.CANCELLED),
    ]
    ensure_unique_ids(orders, _order_id, "order")
    return orders


def sample_products() -> list[Product]:
    return [
        Product("Labtop", "Elec", 1000),
        Product("TV", "Elec", 800),
        Product("Phone", "IOS", 4000),
    ]


def _user_id(user: User) -> int:
    return user.user_id


def _order_id(order: Order) -> int:
    return order.order_id
