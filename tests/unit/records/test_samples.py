"""Unit tests for built-in sample collections."""

from __future__ import annotations

import pytest

from core.errors import SieveRecordError
from core.types import User
from records.record_ids import ensure_unique_ids
from records.samples import sample_orders, sample_products, sample_users


def test_sample_factories_return_fresh_lists() -> None:
    """Each call should build a new collection."""
    first = sample_users()
    first.clear()

    assert len(sample_users()) == 5


def test_sample_collections_have_expected_sizes() -> None:
    assert (len(sample_users()), len(sample_orders()), len(sample_products())) == (5, 5, 3)


def test_ensure_unique_ids_rejects_duplicates() -> None:
    """Duplicate identifiers should raise a record error."""
    users = [User(1, "Alice", True), User(1, "Alias", False)]

    with pytest.raises(SieveRecordError):
        ensure_unique_ids(users, lambda user: user.user_id, "user")
