"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..entities.order import Order
from ..value_objects import OrderFilter


class OrderRepository(ABC):
    """Abstract persistence store for orders.

    Implementations raise ``StoreError`` for any unexpected backend failure
    and must apply each single-order mutation atomically.
    """

    @abstractmethod
    async def add(self, order: Order) -> Order:
        """Insert a new order.

        Args:
            order: Unsaved order (``id`` is ignored)

        Returns:
            Persisted order with store-assigned ``id`` and timestamps
        """
        pass

    @abstractmethod
    async def find_by_id(self, order_id: int) -> Optional[Order]:
        """Retrieve order by identifier.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, criteria: Optional[OrderFilter] = None) -> List[Order]:
        """Scan orders matching the criteria.

        Args:
            criteria: Filter to apply; ``None`` means a full scan

        Returns:
            Matching orders
        """
        pass

    @abstractmethod
    async def exists(self, order_id: int) -> bool:
        """Check if an order with this identifier is stored."""
        pass

    @abstractmethod
    async def update(self, order_id: int, changes: Dict[str, Any]) -> Optional[Order]:
        """Merge ``changes`` into the stored order.

        Args:
            order_id: Order identifier
            changes: Domain field name -> new value; only these fields change

        Returns:
            Updated order, or None if it no longer exists
        """
        pass

    @abstractmethod
    async def delete(self, order_id: int) -> bool:
        """Remove order.

        Returns:
            True if a row was removed
        """
        pass
