"""SQLAlchemy implementation of OrderRepository."""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities.order import Order
from core.domain.exceptions import StoreError
from core.domain.repositories.order_repository import OrderRepository
from core.domain.value_objects import OrderFilter

from ..filters import build_order_predicate
from ..mappers import OrderMapper
from ..models.order_model import OrderModel


logger = logging.getLogger(__name__)


class SqlAlchemyOrderRepository(OrderRepository):
    """Concrete implementation of OrderRepository using SQLAlchemy.

    Every backend exception is re-raised as ``StoreError``. Commit is left to
    the Unit of Work.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def add(self, order: Order) -> Order:
        try:
            model = OrderMapper.to_persistence(order)
            self._session.add(model)
            await self._session.flush()  # Populates id and defaults
            await self._session.refresh(model)
        except SQLAlchemyError as e:
            raise StoreError("add", e) from e
        return OrderMapper.to_domain(model)

    async def find_by_id(self, order_id: int) -> Optional[Order]:
        try:
            model = await self._session.get(OrderModel, order_id)
        except SQLAlchemyError as e:
            raise StoreError("find_by_id", e) from e

        if not model:
            return None

        return OrderMapper.to_domain(model)

    async def find_all(self, criteria: Optional[OrderFilter] = None) -> List[Order]:
        query = (
            select(OrderModel)
            .where(build_order_predicate(criteria))
            .order_by(OrderModel.id)
        )
        try:
            result = await self._session.execute(query)
            models = result.scalars().all()
        except SQLAlchemyError as e:
            raise StoreError("find_all", e) from e

        return [OrderMapper.to_domain(model) for model in models]

    async def exists(self, order_id: int) -> bool:
        try:
            result = await self._session.execute(
                select(OrderModel.id).where(OrderModel.id == order_id)
            )
            return result.scalar_one_or_none() is not None
        except SQLAlchemyError as e:
            raise StoreError("exists", e) from e

    async def update(self, order_id: int, changes: Dict[str, Any]) -> Optional[Order]:
        values = OrderMapper.to_column_values(changes)
        try:
            # Single UPDATE touching only the supplied columns
            result = await self._session.execute(
                update(OrderModel)
                .where(OrderModel.id == order_id)
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                return None
            model = await self._session.get(
                OrderModel, order_id, populate_existing=True
            )
        except SQLAlchemyError as e:
            raise StoreError("update", e) from e

        return OrderMapper.to_domain(model) if model else None

    async def delete(self, order_id: int) -> bool:
        try:
            result = await self._session.execute(
                delete(OrderModel).where(OrderModel.id == order_id)
            )
        except SQLAlchemyError as e:
            raise StoreError("delete", e) from e
        return result.rowcount > 0
