"""Database models."""

from .base import Base
from .order_model import OrderModel

__all__ = ["Base", "OrderModel"]
