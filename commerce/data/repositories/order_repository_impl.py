"""SQLAlchemy implementation of OrderRepository."""

from typing import List, Optional
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from commerce.domain.entities import Order
from commerce.domain.exceptions import NotFoundError
from commerce.domain.repositories import OrderRepository

from ..mappers import OrderMapper
from ..models import OrderModel
from .base import SqlAlchemyRepository


logger = logging.getLogger(__name__)


class SqlAlchemyOrderRepository(SqlAlchemyRepository[OrderModel], OrderRepository):
    """
    SQLAlchemy implementation of OrderRepository.

    One parent row in `orders` plus one row per item in `order_items`.
    """

    entity_name = "Order"

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        super().__init__(session, OrderModel)

    async def create(self, order: Order) -> None:
        """Insert the order row and all item rows in item order.

        Args:
            order: Order domain aggregate

        Raises:
            PersistenceError: Duplicate id or unknown customer/product
        """
        logger.info(f"Creating order: {order.id} ({len(order.items)} items)")

        await self._ensure_absent(order.id)
        self._session.add(OrderMapper.to_persistence(order))
        await self._flush("create", order.id)

        logger.info(f"✅ Created order: {order.id}")

    async def update(self, order: Order) -> None:
        """Replace parent fields and the complete item set.

        Old item rows are deleted and flushed before the new rows are added,
        all inside the session's current transaction.

        Args:
            order: Order domain aggregate with the full desired item list

        Raises:
            NotFoundError: If the order does not exist
            PersistenceError: On constraint violation
        """
        logger.info(f"Updating order: {order.id} ({len(order.items)} items)")

        model = await self._load(order.id)
        if model is None:
            logger.info(f"Order not found: {order.id}")
            raise NotFoundError(self.entity_name, order.id)

        OrderMapper.update_persistence(order, model)

        # Clear and rebuild items
        model.items.clear()
        await self._flush("update", order.id)
        model.items.extend(OrderMapper.items_to_persistence(order))
        await self._flush("update", order.id)

        logger.info(f"✅ Updated order: {order.id}")

    async def find(self, order_id: str) -> Order:
        """Get order by ID.

        Args:
            order_id: Order ID to lookup

        Returns:
            Order aggregate with items in their original order

        Raises:
            NotFoundError: If no order matches
        """
        logger.info(f"Getting order: {order_id}")

        model = await self._load(order_id)
        if model is None:
            logger.info(f"Order not found: {order_id}")
            raise NotFoundError(self.entity_name, order_id)

        return OrderMapper.to_domain(model)

    async def find_all(self) -> List[Order]:
        """Find all orders with their items."""
        logger.info("Finding all orders")

        result = await self._session.execute(
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .order_by(OrderModel.id)
            .execution_options(populate_existing=True)
        )
        orders = [OrderMapper.to_domain(model) for model in result.scalars().all()]

        logger.info(f"✅ Found {len(orders)} orders")
        return orders

    async def _load(self, order_id: str) -> Optional[OrderModel]:
        """Query with eager loading of items."""
        result = await self._session.execute(
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .where(OrderModel.id == order_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()
