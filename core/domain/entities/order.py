"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..enums import OrderStatus


@dataclass
class Order:
    """
    Customer purchase record.

    ``id``, ``created_at`` and ``updated_at`` are owned by the store and are
    ``None`` until the order has been persisted. ``items`` is an opaque list
    of JSON objects kept exactly as the client sent them.
    """
    customer_name: str
    total_amount: float
    status: OrderStatus = OrderStatus.PENDING
    items: List[Dict[str, Any]] = field(default_factory=list)

    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if not isinstance(self.status, OrderStatus):
            self.status = OrderStatus(self.status)
        if self.items is None:
            self.items = []
