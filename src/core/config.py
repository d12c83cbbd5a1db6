"""Runtime configuration model for recordsieve.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
import os

from core.amounts import parse_amount
from core.constants import DEFAULT_LOG_LEVEL, DEFAULT_MIN_ORDER_TOTAL, SUPPORTED_LOG_LEVELS
from core.errors import SieveConfigError


@dataclass(frozen=True)
class SieveConfig:
    """Validated runtime configuration.

    Attributes:
        log_level: Minimum level for structured log events.
        min_order_total: Default exclusive threshold for high-value orders.
    """

    log_level: str
    min_order_total: Decimal

    @classmethod
    def from_env(cls) -> "SieveConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            SieveConfigError: If environment values are invalid.
        """
        return cls(log_level=log_level_from_env(), min_order_total=min_order_total_from_env())


def log_level_from_env() -> str:
    """Read and validate ``SIEVE_LOG_LEVEL``.

    Raises:
        SieveConfigError: If the level is not supported.
    """
    return parse_log_level(os.getenv("SIEVE_LOG_LEVEL", DEFAULT_LOG_LEVEL))


def min_order_total_from_env() -> Decimal:
    """Read and validate ``SIEVE_MIN_ORDER_TOTAL``.

    Raises:
        SieveConfigError: If the value is not a non-negative number.
    """
    return _parse_min_order_total(
        os.getenv("SIEVE_MIN_ORDER_TOTAL", str(DEFAULT_MIN_ORDER_TOTAL))
    )


def parse_log_level(raw_value: str) -> str:
    """Normalize and validate a log level name.

    Args:
        raw_value: Level name in any case.

    Returns:
        Upper-case level name.

    Raises:
        SieveConfigError: If the level is not supported.
    """
    level = raw_value.strip().upper()
    if level not in SUPPORTED_LOG_LEVELS:
        raise SieveConfigError(
            f"Invalid log level '{raw_value}'. "
            f"Use one of: {', '.join(SUPPORTED_LOG_LEVELS)}."
        )
    return level


def _parse_min_order_total(raw_value: str) -> Decimal:
    return parse_amount(
        raw_value,
        "SIEVE_MIN_ORDER_TOTAL",
        SieveConfigError,
    )
