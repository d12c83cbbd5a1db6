"""Decimal amount parsing shared by records, criteria, and config."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from core.errors import SieveError


def parse_amount(
    raw_value: object,
    field_name: str,
    error_type: type[SieveError],
) -> Decimal:
    """Convert a raw value into a finite non-negative decimal.

    Args:
        raw_value: Decimal, int, float, or numeric string.
        field_name: Field label used in error messages.
        error_type: Exception type raised on failure.

    Returns:
        Parsed decimal amount.

    Raises:
        SieveError: Subclass given by ``error_type`` for bad values.
    """
    if isinstance(raw_value, bool):
        raise error_type(f"Invalid {field_name}: expected a number, got bool.")
    if isinstance(raw_value, Decimal):
        amount = raw_value
    elif isinstance(raw_value, (int, float, str)):
        try:
            amount = Decimal(str(raw_value).strip())
        except InvalidOperation as error:
            raise error_type(
                f"Invalid {field_name}: expected a number, got '{raw_value}'."
            ) from error
    else:
        raise error_type(
            f"Invalid {field_name}: expected a number, got {type(raw_value).__name__}."
        )
    if not amount.is_finite():
        raise error_type(f"Invalid {field_name}: '{raw_value}' is not a finite number.")
    if amount < 0:
        raise error_type(f"Invalid {field_name}: must be non-negative, got {amount}.")
    if amount.is_zero():
        return amount.copy_abs()
    return amount
