"""Static mappers for domain entities ↔ database models."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from core.domain.entities.order import Order
from core.domain.enums import OrderStatus

from .models.order_model import OrderModel


# Domain attribute -> ORM column attribute
ORDER_COLUMNS: Dict[str, str] = {
    "customer_name": "customer_name",
    "total_amount": "total_amount",
    "status": "status",
    "items": "items",
}


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite drops tzinfo on the way back
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain entity.

        Args:
            model: OrderModel instance

        Returns:
            Order domain entity
        """
        return Order(
            id=model.id,
            customer_name=model.customer_name,
            total_amount=float(model.total_amount),
            status=OrderStatus(model.status),
            items=list(model.items or []),
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at),
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain entity to a new ORM model (id left to the store).

        Args:
            entity: Order domain entity

        Returns:
            OrderModel instance
        """
        return OrderModel(
            customer_name=entity.customer_name,
            total_amount=entity.total_amount,
            status=OrderStatus(entity.status).value,
            items=list(entity.items or []),
        )

    @staticmethod
    def to_column_values(changes: Dict[str, Any]) -> Dict[str, Any]:
        """Translate domain field changes into column values for an UPDATE.

        Raises:
            KeyError: If a change names a field that is not client-mutable
        """
        values = {}
        for field_name, value in changes.items():
            column = ORDER_COLUMNS[field_name]
            if field_name == "status":
                value = OrderStatus(value).value
            elif field_name == "items":
                value = list(value or [])
            values[column] = value
        return values
