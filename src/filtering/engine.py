"""Record filtering engine.

This module applies a criteria set to an ordered record collection.
Every present criterion must hold (logical AND); a record is dropped at
its first failing criterion, and input order is preserved.
"""

from __future__ import annotations

from typing import Iterable, Iterator, TypeVar

from core.logging_config import get_logger
from filtering.criterion import CriteriaSet, Criterion

T = TypeVar("T")

_LOGGER = get_logger(__name__)


def iter_matching(records: Iterable[T], criteria: CriteriaSet[T]) -> Iterator[T]:
    """Lazily yield records that satisfy every present criterion.

    Args:
        records: Input records to scan.
        criteria: Filter constraints.

    Returns:
        Iterator over matching records in input order.
    """
    return _iter_matching_predicates(records, criteria.predicates())


def filter_records(records: Iterable[T], criteria: CriteriaSet[T]) -> list[T]:
    """Filter records using a criteria set.

    Args:
        records: Input records to filter. Never mutated.
        criteria: Filter constraints.

    Returns:
        New list of matching records in input order.
    """
    predicates = criteria.predicates()
    filtered = list(_iter_matching_predicates(records, predicates))
    _LOGGER.debug(
        "records_filtered",
        criteria=[criterion.name for criterion in predicates],
        matched_count=len(filtered),
    )
    return filtered


def _iter_matching_predicates(
    records: Iterable[T],
    predicates: tuple[Criterion[T], ...],
) -> Iterator[T]:
    for record in records:
        if all(criterion.matches(record) for criterion in predicates):
            yield record
