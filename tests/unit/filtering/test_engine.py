"""Unit tests for the record filtering engine."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable, Iterator

import pytest

from core.types import Order, OrderStatus, Product, User
from filtering.criteria import OrderCriteria, ProductCriteria, UserCriteria
from filtering.criterion import CriteriaSet, Criterion
from filtering.engine import filter_records, iter_matching
from records.samples import sample_orders, sample_products, sample_users

_CRITERIA_CASES = (
    (sample_products, ProductCriteria()),
    (sample_products, ProductCriteria(search_term="TV")),
    (sample_products, ProductCriteria(search_term="o", category="Elec")),
    (sample_products, ProductCriteria(category="IOS", min_price=Decimal("4000"))),
    (sample_products, ProductCriteria(search_term="TV", category="Elec", min_price=Decimal("80"))),
    (sample_products, ProductCriteria(min_price=Decimal("5000"))),
    (sample_orders, OrderCriteria()),
    (sample_orders, OrderCriteria(min_total=Decimal("1000"))),
    (sample_orders, OrderCriteria(status=OrderStatus.PENDING)),
    (sample_orders, OrderCriteria(min_total=Decimal("1000"), status=OrderStatus.COMPLETED)),
    (sample_orders, OrderCriteria(min_total=Decimal("1500"), status=OrderStatus.COMPLETED)),
    (sample_users, UserCriteria()),
    (sample_users, UserCriteria(active=True)),
    (sample_users, UserCriteria(active=False)),
)


def _matches_all(record: object, criteria: CriteriaSet[Any]) -> bool:
    return all(criterion.matches(record) for criterion in criteria.predicates())


@pytest.mark.parametrize(("make_records", "criteria"), _CRITERIA_CASES)
def test_filter_records_is_sound_and_complete(
    make_records: Callable[[], list[Any]],
    criteria: CriteriaSet[Any],
) -> None:
    """Kept records satisfy every criterion and dropped records fail one."""
    records = make_records()

    kept = filter_records(records, criteria)
    dropped = [record for record in records if record not in kept]

    assert all(_matches_all(record, criteria) for record in kept)
    assert not any(_matches_all(record, criteria) for record in dropped)


@pytest.mark.parametrize(("make_records", "criteria"), _CRITERIA_CASES)
def test_filter_records_is_idempotent(
    make_records: Callable[[], list[Any]],
    criteria: CriteriaSet[Any],
) -> None:
    """Filtering a filtered result again changes nothing."""
    once = filter_records(make_records(), criteria)

    assert filter_records(once, criteria) == once


def test_filter_records_without_criteria_returns_input_in_order() -> None:
    """No criteria should keep every record in original order."""
    orders = sample_orders()

    assert filter_records(orders, OrderCriteria()) == orders


def test_filter_records_returns_new_list_and_leaves_input_untouched() -> None:
    users = sample_users()
    snapshot = list(users)

    result = filter_records(users, UserCriteria())

    assert result is not users and users == snapshot


@pytest.mark.parametrize(
    "criteria",
    (UserCriteria(), UserCriteria(active=True), UserCriteria(active=False)),
)
def test_filter_records_on_empty_input_returns_empty_list(criteria: UserCriteria) -> None:
    assert filter_records([], criteria) == []


def test_order_threshold_is_strict() -> None:
    """An order equal to the threshold is excluded; one cent more is kept."""
    orders = [
        Order(1, Decimal("1000"), OrderStatus.COMPLETED),
        Order(2, Decimal("1000.01"), OrderStatus.COMPLETED),
    ]
    criteria = OrderCriteria(min_total=Decimal("1000"), status=OrderStatus.COMPLETED)

    assert [order.order_id for order in filter_records(orders, criteria)] == [2]


def test_minimum_price_is_inclusive() -> None:
    """A product priced exactly at the minimum is kept."""
    products = [Product("Kettle", "Kitchen", Decimal("25")), Product("Cup", "Kitchen", 5)]

    result = filter_records(products, ProductCriteria(min_price=Decimal("25")))

    assert [product.name for product in result] == ["Kettle"]


def test_category_match_is_exact_while_name_match_is_substring() -> None:
    products = [Product("TV", "Elec", 800), Product("TV", "Electronics", 800)]

    by_category = filter_records(products, ProductCriteria(category="Elec"))
    by_name = filter_records(products, ProductCriteria(search_term="T"))

    assert len(by_category) == 1 and len(by_name) == 2


def test_iter_matching_is_lazy() -> None:
    """The lazy form should not pull records past the first match."""
    pulled: list[int] = []

    def user_stream() -> Iterator[User]:
        for user in sample_users():
            pulled.append(user.user_id)
            yield user

    first = next(iter_matching(user_stream(), UserCriteria(active=False)))

    assert first.user_id == 2 and pulled == [1, 2]


def test_filter_records_short_circuits_on_first_failing_criterion() -> None:
    """Later criteria are not evaluated once an earlier one fails."""
    evaluated: list[tuple[str, str]] = []

    def _tracing(name: str, keep: bool) -> Criterion[Product]:
        def predicate(product: Product) -> bool:
            evaluated.append((name, product.name))
            return keep or product.name == "TV"

        return Criterion(name, predicate)

    class _TracingCriteria:
        def predicates(self) -> tuple[Criterion[Product], ...]:
            return (_tracing("first", keep=False), _tracing("second", keep=True))

    result = filter_records(sample_products(), _TracingCriteria())

    assert [product.name for product in result] == ["TV"]
    assert evaluated == [
        ("first", "Labtop"),
        ("first", "TV"),
        ("second", "TV"),
        ("first", "Phone"),
    ]


def test_filter_records_builds_predicates_once() -> None:
    """The criteria applied and the criteria logged come from one predicates() call."""
    calls: list[int] = []

    class _CountingCriteria:
        def predicates(self) -> tuple[Criterion[User], ...]:
            calls.append(len(calls))
            return UserCriteria(active=True).predicates()

    result = filter_records(sample_users(), _CountingCriteria())

    assert [user.user_id for user in result] == [1, 3, 5] and len(calls) == 1
