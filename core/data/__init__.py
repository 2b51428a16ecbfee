"""Data layer - infrastructure persistence and mapping."""

from .filters import build_order_conditions, build_order_predicate
from .mappers import OrderMapper
from .models import Base, OrderModel
from .repositories import SqlAlchemyOrderRepository
from .uow import UnitOfWork, create_uow

__all__ = [
    "Base",
    "build_order_conditions",
    "build_order_predicate",
    "create_uow",
    "OrderMapper",
    "OrderModel",
    "SqlAlchemyOrderRepository",
    "UnitOfWork",
]
