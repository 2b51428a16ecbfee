"""
Order Status Enum.

Lifecycle states an order can be in.
"""
from enum import Enum


class OrderStatus(str, Enum):
    """Order status values."""
    
    PENDING = "pending"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @classmethod
    def values(cls) -> list[str]:
        """Return the raw values in declaration order."""
        return [member.value for member in cls]
