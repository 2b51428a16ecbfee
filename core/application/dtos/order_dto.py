"""Application DTOs for Order operations."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from core.domain.entities.order import Order


# Wire (camelCase) field name -> domain attribute
PAYLOAD_FIELDS: Dict[str, str] = {
    "customerName": "customer_name",
    "totalAmount": "total_amount",
    "status": "status",
    "items": "items",
}


class OrderDTO(BaseModel):
    """Response DTO for order details."""

    id: int = Field(..., description="Store-assigned order ID")
    customer_name: str = Field(..., alias="customerName", description="Customer name")
    total_amount: float = Field(..., alias="totalAmount", gt=0, description="Order total")
    status: str = Field(..., description="Order status")
    items: List[Dict[str, Any]] = Field(default_factory=list, description="Line items, stored verbatim")
    created_at: Optional[datetime] = Field(None, alias="createdAt", description="Creation time")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt", description="Last update time")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @classmethod
    def from_entity(cls, order: Order) -> "OrderDTO":
        return cls(
            id=order.id,
            customer_name=order.customer_name,
            total_amount=order.total_amount,
            status=order.status.value,
            items=order.items,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


def payload_to_fields(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Rename validated wire fields to domain attribute names."""
    return {PAYLOAD_FIELDS[key]: value for key, value in payload.items() if key in PAYLOAD_FIELDS}
