"""Order endpoints for REST API."""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from core.application.dtos.order_dto import OrderDTO
from core.application.services.order_service import OrderApplicationService
from core.application.validation import ValidationMode
from core.domain.value_objects import OrderFilter

from apps.api.deps import get_order_service, validated_body

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderDTO, status_code=status.HTTP_201_CREATED)
async def create_order(
    payload: Dict[str, Any] = Depends(validated_body(ValidationMode.CREATE)),
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDTO:
    """Create a new order.

    `status` defaults to `pending` and `items` to an empty list.
    """
    return await service.create_order(payload)


@router.get("", response_model=List[OrderDTO])
async def list_orders(
    order_status: Optional[str] = Query(default=None, alias="status", description="Exact status match"),
    customer_name: Optional[str] = Query(default=None, alias="customerName", description="Substring of the customer name"),
    service: OrderApplicationService = Depends(get_order_service),
) -> List[OrderDTO]:
    """List orders, optionally filtered by status and/or customer name."""
    criteria = OrderFilter(status=order_status, customer_name=customer_name)
    return await service.list_orders(criteria)


@router.get("/{order_id}", response_model=OrderDTO)
async def get_order(
    order_id: str,
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDTO:
    """Get order by ID."""
    return await service.get_order(order_id)


@router.patch("/{order_id}", response_model=OrderDTO)
async def update_order(
    order_id: str,
    payload: Dict[str, Any] = Depends(validated_body(ValidationMode.UPDATE)),
    service: OrderApplicationService = Depends(get_order_service),
) -> OrderDTO:
    """Partially update an order; fields absent from the body are left untouched."""
    return await service.update_order(order_id, payload)


@router.delete(
    "/{order_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_order(
    order_id: str,
    service: OrderApplicationService = Depends(get_order_service),
) -> Response:
    """Delete an order."""
    await service.delete_order(order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
