"""Translate OrderFilter criteria into SQLAlchemy predicates."""

from typing import List, Optional

from sqlalchemy import and_, true
from sqlalchemy.sql.elements import ColumnElement

from core.domain.value_objects import OrderFilter

from .models.order_model import OrderModel


def build_order_conditions(criteria: Optional[OrderFilter]) -> List[ColumnElement]:
    """
    Build one predicate per supplied criterion.

    ``status`` is an exact match; ``customer_name`` is a substring match with
    LIKE wildcards in the input escaped so they match literally.

    Args:
        criteria: Filter, or None for no constraint

    Returns:
        Predicates to AND together (empty for a full scan)
    """
    if criteria is None:
        return []

    conditions: List[ColumnElement] = []
    if criteria.status is not None:
        conditions.append(OrderModel.status == criteria.status)
    if criteria.customer_name is not None:
        conditions.append(
            OrderModel.customer_name.contains(criteria.customer_name, autoescape=True)
        )
    return conditions


def build_order_predicate(criteria: Optional[OrderFilter]) -> ColumnElement:
    """Combine all criteria into a single conjunctive WHERE clause."""
    conditions = build_order_conditions(criteria)
    if not conditions:
        return true()
    return and_(*conditions)
