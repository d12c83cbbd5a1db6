"""Core constants used across recordsieve modules.

This module centralizes non-domain-specific constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from decimal import Decimal

DEFAULT_LOG_LEVEL = "WARNING"
SUPPORTED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
DEFAULT_MIN_ORDER_TOTAL = Decimal("1000")
ANY_CHOICE = "any"
RECORD_FILE_ENCODING = "utf-8"
