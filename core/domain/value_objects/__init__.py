"""Domain value objects."""

from .order_filter import OrderFilter

__all__ = ["OrderFilter"]
