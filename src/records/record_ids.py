"""Collection-level identifier checks."""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar

from core.errors import SieveRecordError

T = TypeVar("T")


def ensure_unique_ids(records: Iterable[T], id_getter: Callable[[T], int], kind: str) -> None:
    """Raise when two records in one collection share an identifier.

    Args:
        records: Collection to check.
        id_getter: Returns the identifier of one record.
        kind: Record kind used in the error message.

    Raises:
        SieveRecordError: On the first duplicate identifier.
    """
    seen_ids: set[int] = set()
    for record in records:
        record_id = id_getter(record)
        if record_id in seen_ids:
            raise SieveRecordError(
                f"Duplicate {kind} id {record_id}. Identifiers must be unique per collection."
            )
        seen_ids.add(record_id)
