"""Per-record-type criteria sets.

Each set is an immutable bundle of optional fields. Values are validated
and normalized when the set is constructed, so evaluation never fails:
blank text becomes None, amounts become non-negative decimals, and
status names resolve to ``OrderStatus`` members.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from core.amounts import parse_amount
from core.errors import SieveCriteriaError
from core.types import Order, OrderStatus, Product, User
from filtering.criterion import (
    Criterion,
    at_least,
    contains,
    equals,
    greater_than,
    present,
)


@dataclass(frozen=True)
class UserCriteria:
    """User filter constraints.

    Attributes:
        active: Optional exact match on the active flag.
    """

    active: bool | None = None

    def __post_init__(self) -> None:
        if self.active is not None and not isinstance(self.active, bool):
            raise SieveCriteriaError(
                f"Invalid active criterion: expected bool, got {type(self.active).__name__}."
            )

    def predicates(self) -> tuple[Criterion[User], ...]:
        return present(equals("is_active", _user_is_active, self.active))


@dataclass(frozen=True)
class OrderCriteria:
    """Order filter constraints.

    Attributes:
        min_total: Optional exclusive lower bound on the order total.
        status: Optional exact status match; accepts a status name.
    """

    min_total: Decimal | None = None
    status: OrderStatus | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "min_total", _optional_amount(self.min_total, "min_total"))
        object.__setattr__(self, "status", _optional_status(self.status))

    def predicates(self) -> tuple[Criterion[Order], ...]:
        return present(
            greater_than("total_amount", _order_total, self.min_total),
            equals("status", _order_status, self.status),
        )


@dataclass(frozen=True)
class ProductCriteria:
    """Product filter constraints.

    Attributes:
        search_term: Optional case-sensitive substring of the product name.
        category: Optional exact category match.
        min_price: Optional inclusive lower bound on price.
    """

    search_term: str | None = None
    category: str | None = None
    min_price: Decimal | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "search_term", _optional_text(self.search_term, "search_term"))
        object.__setattr__(self, "category", _optional_text(self.category, "category"))
        object.__setattr__(self, "min_price", _optional_amount(self.min_price, "min_price"))

    def predicates(self) -> tuple[Criterion[Product], ...]:
        return present(
            contains("name", _product_name, self.search_term),
            equals("category", _product_category, self.category),
            at_least("price", _product_price, self.min_price),
        )


def _optional_amount(raw_value: object, field_name: str) -> Decimal | None:
    if raw_value is None:
        return None
    if isinstance(raw_value, str) and not raw_value.strip():
        return None
    return parse_amount(raw_value, f"{field_name} criterion", SieveCriteriaError)


def _optional_text(raw_value: object, field_name: str) -> str | None:
    if raw_value is None:
        return None
    if not isinstance(raw_value, str):
        raise SieveCriteriaError(
            f"Invalid {field_name} criterion: expected str, got {type(raw_value).__name__}."
        )
    # whitespace-only means "not supplied"; non-blank terms are kept verbatim
    if not raw_value.strip():
        return None
    return raw_value


def _optional_status(raw_value: object) -> OrderStatus | None:
    if raw_value is None or isinstance(raw_value, OrderStatus):
        return raw_value
    if not isinstance(raw_value, str):
        raise SieveCriteriaError(
            f"Invalid status criterion: expected OrderStatus or str, "
            f"got {type(raw_value).__name__}."
        )
    if not raw_value.strip():
        return None
    try:
        return OrderStatus.parse(raw_value)
    except ValueError as error:
        raise SieveCriteriaError(str(error)) from error


def _user_is_active(user: User) -> bool:
    return user.is_active


def _order_total(order: Order) -> Decimal:
    return order.total_amount


def _order_status(order: Order) -> OrderStatus:
    return order.status


def _product_name(product: Product) -> str:
    return product.name


def _product_category(product: Product) -> str:
    return product.category


def _product_price(product: Product) -> Decimal:
    return product.price
