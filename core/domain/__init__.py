"""Domain layer - pure domain models and interfaces."""

from .entities import Order
from .enums import OrderStatus
from .exceptions import (
    OrderError,
    OrderNotFoundError,
    OrderValidationError,
    StoreError,
)
from .repositories import OrderRepository
from .value_objects import OrderFilter

__all__ = [
    "Order",
    "OrderError",
    "OrderFilter",
    "OrderNotFoundError",
    "OrderRepository",
    "OrderStatus",
    "OrderValidationError",
    "StoreError",
]
