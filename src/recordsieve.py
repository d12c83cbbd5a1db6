"""Public SDK surface for recordsieve.

This module provides a stable import path for library users.
It re-exports the record models, criteria sets, and filter entry points.
"""

from __future__ import annotations

from core.config import SieveConfig
from core.errors import SieveConfigError, SieveCriteriaError, SieveError, SieveRecordError
from core.types import Order, OrderStatus, Product, User
from filtering.criteria import OrderCriteria, ProductCriteria, UserCriteria
from filtering.criterion import CriteriaSet, Criterion
from filtering.domain_filters import active_users, high_value_orders, search_products
from filtering.engine import filter_records, iter_matching
from records.record_file import load_orders, load_products, load_users
from records.samples import sample_orders, sample_products, sample_users

__all__ = [
    "CriteriaSet",
    "Criterion",
    "Order",
    "OrderCriteria",
    "OrderStatus",
    "Product",
    "ProductCriteria",
    "SieveConfig",
    "SieveConfigError",
    "SieveCriteriaError",
    "SieveError",
    "SieveRecordError",
    "User",
    "UserCriteria",
    "active_users",
    "filter_records",
    "high_value_orders",
    "iter_matching",
    "load_orders",
    "load_products",
    "load_users",
    "sample_orders",
    "sample_products",
    "sample_users",
    "search_products",
]
