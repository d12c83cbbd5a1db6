"""YAML record file loading.

A record file is a top-level YAML list of mappings whose keys match the
record field names. Loading validates every row and fails with a
``SieveRecordError`` that names the offending file and row.
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path
from typing import Callable, Literal, Mapping, Sequence, TypeVar, cast

import yaml

from core.constants import RECORD_FILE_ENCODING
from core.errors import SieveRecordError
from core.logging_config import get_logger
from core.types import Order, OrderStatus, Product, User
from records.record_ids import ensure_unique_ids

RecordKind = Literal["users", "orders", "products"]
T = TypeVar("T")

_LOGGER = get_logger(__name__)

_USER_FIELDS = ("user_id", "name", "is_active")
_ORDER_FIELDS = ("order_id", "total_amount", "status")
_PRODUCT_FIELDS = ("name", "category", "price")


def load_users(records_path: str) -> list[User]:
    """Load users from a YAML record file.

    Args:
        records_path: File path to YAML records.

    Returns:
        Users in file order.

    Raises:
        SieveRecordError: If the file or any row is invalid.
    """
    users = _load_rows(records_path, "users", _USER_FIELDS, _build_user)
    ensure_unique_ids(users, lambda user: user.user_id, "user")
    return users


def load_orders(records_path: str) -> list[Order]:
    """Load orders from a YAML record file.

    Args:
        records_path: File path to YAML records.

    Returns:
        Orders in file order.

    Raises:
        SieveRecordError: If the file or any row is invalid.
    """
    orders = _load_rows(records_path, "orders", _ORDER_FIELDS, _build_order)
    ensure_unique_ids(orders, lambda order: order.order_id, "order")
    return orders


def load_products(records_path: str) -> list[Product]:
    """Load products from a YAML record file.

    Args:
        records_path: File path to YAML records.

    Returns:
        Products in file order.

    Raises:
        SieveRecordError: If the file or any row is invalid.
    """
    return _load_rows(records_path, "products", _PRODUCT_FIELDS, _build_product)


def _load_rows(
    records_path: str,
    kind: RecordKind,
    field_names: tuple[str, ...],
    builder: Callable[[Mapping[str, object]], T],
) -> list[T]:
    records_file = Path(records_path).expanduser().resolve()
    payload = _load_yaml_payload(records_file)
    rows = _expect_sequence(payload, f"{kind} file {records_file}")
    records: list[T] = []
    for index, raw_row in enumerate(rows, start=1):
        context = f"{kind} row {index} in {records_file}"
        row = _expect_mapping(raw_row, context)
        _validate_row_keys(row, field_names, context)
        try:
            records.append(builder(row))
        except SieveRecordError as error:
            raise SieveRecordError(f"Invalid {context}: {error}") from error
    _LOGGER.info("records_loaded", kind=kind, path=str(records_file), record_count=len(records))
    return records


def _load_yaml_payload(records_file: Path) -> object:
    if not records_file.exists():
        raise SieveRecordError(
            f"Record file does not exist at {records_file}. Provide a valid YAML file path."
        )
    try:
        payload = cast(
            object, yaml.safe_load(records_file.read_text(encoding=RECORD_FILE_ENCODING))
        )
    except OSError as error:
        raise SieveRecordError(
            f"Failed to read record file at {records_file}: {error}. "
            "Check file permissions and retry."
        ) from error
    except yaml.YAMLError as error:
        raise SieveRecordError(
            f"Failed to parse YAML record file at {records_file}: {error}. "
            "Fix YAML syntax and retry."
        ) from error
    if payload is None:
        return []
    return payload


def _expect_mapping(value: object, context: str) -> Mapping[str, object]:
    if isinstance(value, Mapping):
        normalized_mapping = {}
        for key, payload in value.items():
            if not isinstance(key, str):
                raise SieveRecordError(
                    f"Invalid {context}: expected string keys, got {type(key).__name__}."
                )
            normalized_mapping[key] = payload
        return normalized_mapping
    raise SieveRecordError(
        f"Invalid {context}: expected object mapping, got {type(value).__name__}."
    )


def _expect_sequence(value: object, context: str) -> Sequence[object]:
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return value
    raise SieveRecordError(f"Invalid {context}: expected list, got {type(value).__name__}.")


def _validate_row_keys(
    row: Mapping[str, object],
    field_names: tuple[str, ...],
    context: str,
) -> None:
    missing = [name for name in field_names if name not in row]
    if missing:
        raise SieveRecordError(f"Invalid {context}: missing fields {', '.join(missing)}.")
    unknown = sorted(set(row) - set(field_names))
    if unknown:
        raise SieveRecordError(f"Invalid {context}: unknown fields {', '.join(unknown)}.")


def _build_user(row: Mapping[str, object]) -> User:
    return User(
        user_id=cast(int, row["user_id"]),
        name=cast(str, row["name"]),
        is_active=cast(bool, row["is_active"]),
    )


def _build_order(row: Mapping[str, object]) -> Order:
    raw_status = row["status"]
    if not isinstance(raw_status, str):
        raise SieveRecordError(
            f"Invalid status: expected str, got {type(raw_status).__name__}."
        )
    try:
        status = OrderStatus.parse(raw_status)
    except ValueError as error:
        raise SieveRecordError(str(error)) from error
    return Order(
        order_id=cast(int, row["order_id"]),
        total_amount=cast(Decimal, row["total_amount"]),
        status=status,
    )


def _build_product(row: Mapping[str, object]) -> Product:
    return Product(
        name=cast(str, row["name"]),
        category=cast(str, row["category"]),
        price=cast(Decimal, row["price"]),
    )
