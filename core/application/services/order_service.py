"""Application service for Order operations."""

import logging
import re
from typing import Any, Dict, List, Optional, Union

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos.order_dto import OrderDTO, payload_to_fields
from core.data.uow import create_uow
from core.domain.entities.order import Order
from core.domain.enums import OrderStatus
from core.domain.exceptions import OrderNotFoundError, StoreError
from core.domain.value_objects import OrderFilter


logger = logging.getLogger(__name__)

OrderId = Union[int, str]

_ID_PATTERN = re.compile(r"[0-9]+")
MIN_ORDER_ID = -(2 ** 63)
MAX_ORDER_ID = 2 ** 63 - 1


class OrderApplicationService:
    """
    Application service for orchestrating order operations.

    Responsibilities:
    - Handle transactions via UoW
    - Check existence before any mutating store call
    - Log every outcome for the audit trail
    - Transform between payloads, domain entities and DTOs

    Payloads passed in are assumed to have been validated already.
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize order application service.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory

    async def create_order(self, payload: Dict[str, Any]) -> OrderDTO:
        """Create a new order.

        Args:
            payload: Validated create payload (camelCase keys)

        Returns:
            OrderDTO with the store-assigned id
        """
        fields = payload_to_fields(payload)
        order = Order(
            customer_name=fields["customer_name"],
            total_amount=float(fields["total_amount"]),
            status=fields.get("status", OrderStatus.PENDING),
            items=fields.get("items") or [],
        )

        try:
            async with create_uow(self._session_factory) as uow:
                created = await uow.orders.add(order)
                await uow.commit()
        except StoreError as e:
            self._log_store_error("create", e, fields=sorted(payload))
            raise

        logger.info(
            "Order created",
            extra={"operation": "create", "orderId": created.id, "fields": sorted(payload)},
        )
        return OrderDTO.from_entity(created)

    async def list_orders(self, criteria: Optional[OrderFilter] = None) -> List[OrderDTO]:
        """List orders matching the optional filters.

        Args:
            criteria: Status / customer name filter

        Returns:
            List of OrderDTO instances
        """
        criteria = criteria or OrderFilter()
        try:
            async with create_uow(self._session_factory) as uow:
                orders = await uow.orders.find_all(criteria)
        except StoreError as e:
            self._log_store_error("list", e, query=criteria.as_dict())
            raise

        logger.info(
            "Orders retrieved",
            extra={"operation": "list", "count": len(orders), "query": criteria.as_dict()},
        )
        return [OrderDTO.from_entity(order) for order in orders]

    async def get_order(self, order_id: OrderId) -> OrderDTO:
        """Get order by ID.

        Raises:
            OrderNotFoundError: If no order has this id
        """
        key = self._parse_id(order_id, "get")
        try:
            async with create_uow(self._session_factory) as uow:
                order = await uow.orders.find_by_id(key)
        except StoreError as e:
            self._log_store_error("get", e, orderId=key)
            raise

        if order is None:
            raise self._not_found("get", order_id)

        logger.info("Order retrieved", extra={"operation": "get", "orderId": order.id})
        return OrderDTO.from_entity(order)

    async def update_order(self, order_id: OrderId, payload: Dict[str, Any]) -> OrderDTO:
        """Merge the supplied fields into an existing order.

        Args:
            order_id: Order identifier
            payload: Validated partial payload (camelCase keys)

        Returns:
            OrderDTO of the updated order

        Raises:
            OrderNotFoundError: If no order has this id
        """
        key = self._parse_id(order_id, "update")
        changes = payload_to_fields(payload)
        try:
            async with create_uow(self._session_factory) as uow:
                if not await uow.orders.exists(key):
                    raise self._not_found("update", order_id)
                updated = await uow.orders.update(key, changes)
                if updated is None:
                    # Removed between the existence check and the update
                    raise self._not_found("update", order_id)
                await uow.commit()
        except StoreError as e:
            self._log_store_error("update", e, orderId=key, updates=payload)
            raise

        logger.info(
            "Order updated",
            extra={"operation": "update", "orderId": key, "updates": payload},
        )
        return OrderDTO.from_entity(updated)

    async def delete_order(self, order_id: OrderId) -> None:
        """Delete an order.

        Raises:
            OrderNotFoundError: If no order has this id
        """
        key = self._parse_id(order_id, "delete")
        try:
            async with create_uow(self._session_factory) as uow:
                if not await uow.orders.exists(key):
                    raise self._not_found("delete", order_id)
                if not await uow.orders.delete(key):
                    raise self._not_found("delete", order_id)
                await uow.commit()
        except StoreError as e:
            self._log_store_error("delete", e, orderId=key)
            raise

        logger.info("Order deleted", extra={"operation": "delete", "orderId": key})

    def _parse_id(self, order_id: OrderId, operation: str) -> int:
        """Coerce a path identifier; anything but a plain decimal id cannot resolve."""
        if isinstance(order_id, int) and not isinstance(order_id, bool):
            key = order_id
        elif isinstance(order_id, str) and _ID_PATTERN.fullmatch(order_id):
            key = int(order_id)
        else:
            raise self._not_found(operation, order_id)

        # SQLite INTEGER is a signed 64-bit value
        if not MIN_ORDER_ID <= key <= MAX_ORDER_ID:
            raise self._not_found(operation, order_id)
        return key

    def _not_found(self, operation: str, order_id: OrderId) -> OrderNotFoundError:
        logger.warning(
            "Order not found",
            extra={"operation": operation, "orderId": order_id},
        )
        return OrderNotFoundError(order_id)

    def _log_store_error(self, operation: str, error: StoreError, **context: Any) -> None:
        logger.error(
            f"Error during order {operation}: {error.cause}",
            exc_info=error.cause,
            extra={"operation": operation, **context},
        )
