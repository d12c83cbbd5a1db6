"""Shared typed record models.

This module defines the immutable record shapes filtered by the engine.
Constructors validate field types so every record in a collection is
well-formed before any criteria are applied.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from core.amounts import parse_amount
from core.errors import SieveRecordError


class OrderStatus(Enum):
    """Closed set of order lifecycle states."""

    PENDING = "Pending"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"

    @classmethod
    def parse(cls, raw_value: str) -> "OrderStatus":
        """Resolve a status from its display name, ignoring case.

        Args:
            raw_value: Status name such as ``Completed``.

        Returns:
            Matching enum member.

        Raises:
            ValueError: If the name is not a known status.
        """
        normalized = raw_value.strip().lower()
        for status in cls:
            if status.value.lower() == normalized:
                return status
        raise ValueError(
            f"Unknown order status '{raw_value}'. "
            f"Use one of: {', '.join(supported_order_statuses())}."
        )


def supported_order_statuses() -> tuple[str, ...]:
    """Return display names of all order statuses."""
    return tuple(status.value for status in OrderStatus)


@dataclass(frozen=True)
class User:
    """One user account.

    Attributes:
        user_id: Identifier, unique within a collection.
        name: Display name.
        is_active: Whether the account is active.
    """

    user_id: int
    name: str
    is_active: bool

    def __post_init__(self) -> None:
        _require_identifier(self.user_id, "user_id")
        _require_text(self.name, "name")
        if not isinstance(self.is_active, bool):
            raise SieveRecordError(
                f"Invalid is_active: expected bool, got {type(self.is_active).__name__}."
            )


@dataclass(frozen=True)
class Order:
    """One customer order.

    Attributes:
        order_id: Identifier, unique within a collection.
        total_amount: Non-negative order total.
        status: Lifecycle status.
    """

    order_id: int
    total_amount: Decimal
    status: OrderStatus

    def __post_init__(self) -> None:
        _require_identifier(self.order_id, "order_id")
        amount = parse_amount(self.total_amount, "total_amount", SieveRecordError)
        object.__setattr__(self, "total_amount", amount)
        if not isinstance(self.status, OrderStatus):
            raise SieveRecordError(
                f"Invalid status: expected OrderStatus, got {type(self.status).__name__}."
            )


@dataclass(frozen=True)
class Product:
    """One catalog product.

    Attributes:
        name: Product name.
        category: Category label.
        price: Non-negative unit price.
    """

    name: str
    category: str
    price: Decimal

    def __post_init__(self) -> None:
        _require_text(self.name, "name")
        _require_text(self.category, "category")
        object.__setattr__(self, "price", parse_amount(self.price, "price", SieveRecordError))


def _require_identifier(value: object, field_name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SieveRecordError(
            f"Invalid {field_name}: expected int, got {type(value).__name__}."
        )


def _require_text(value: object, field_name: str) -> None:
    if not isinstance(value, str):
        raise SieveRecordError(
            f"Invalid {field_name}: expected str, got {type(value).__name__}."
        )
