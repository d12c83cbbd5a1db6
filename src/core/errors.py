"""Recordsieve exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each layer raises a specific error type for debuggability.
"""

from __future__ import annotations


class SieveError(Exception):
    """Base exception for all recordsieve failures."""


class SieveConfigError(SieveError):
    """Raised for invalid runtime configuration."""


class SieveCriteriaError(SieveError):
    """Raised when a filter criterion has an invalid type or value."""


class SieveRecordError(SieveError):
    """Raised for invalid records and unreadable record files."""
