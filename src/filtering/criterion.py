"""Named predicate building blocks for criteria sets."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Generic, Protocol, TypeVar

T = TypeVar("T")
V = TypeVar("V")


@dataclass(frozen=True)
class Criterion(Generic[T]):
    """One named predicate a record must satisfy.

    Attributes:
        name: Short label used in logs, e.g. ``price>=80``.
        predicate: Callable returning True when the record matches.
    """

    name: str
    predicate: Callable[[T], bool]

    def matches(self, record: T) -> bool:
        """Return whether the record satisfies this criterion."""
        return self.predicate(record)


class CriteriaSet(Protocol[T]):
    """Typed bundle of optional criteria for one record type."""

    def predicates(self) -> tuple[Criterion[T], ...]:
        """Return criteria for every present field, in evaluation order."""
        ...


def equals(name: str, getter: Callable[[T], V], expected: V | None) -> Criterion[T] | None:
    """Build an equality criterion, or None when no value is supplied."""
    if expected is None:
        return None
    return Criterion(f"{name}=={expected}", lambda record: getter(record) == expected)


def greater_than(
    name: str,
    getter: Callable[[T], Decimal],
    bound: Decimal | None,
) -> Criterion[T] | None:
    """Build a strict lower-bound criterion, or None when no bound is supplied."""
    if bound is None:
        return None
    return Criterion(f"{name}>{bound}", lambda record: getter(record) > bound)


def at_least(
    name: str,
    getter: Callable[[T], Decimal],
    bound: Decimal | None,
) -> Criterion[T] | None:
    """Build an inclusive lower-bound criterion, or None when no bound is supplied."""
    if bound is None:
        return None
    return Criterion(f"{name}>={bound}", lambda record: getter(record) >= bound)


def contains(name: str, getter: Callable[[T], str], fragment: str | None) -> Criterion[T] | None:
    """Build a case-sensitive substring criterion, or None when no fragment is supplied."""
    if fragment is None:
        return None
    return Criterion(f"{name}~{fragment}", lambda record: fragment in getter(record))


def present(*candidates: Criterion[T] | None) -> tuple[Criterion[T], ...]:
    """Drop absent criteria while keeping declaration order."""
    return tuple(candidate for candidate in candidates if candidate is not None)
