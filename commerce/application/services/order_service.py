"""Application service for Order operations."""

from typing import List
import uuid

from commerce.application.dtos import OrderDTO, OrderItemDTO, PlaceOrderRequest
from commerce.data import Database
from commerce.domain.entities import Order, OrderItem
from commerce.domain.services import OrderService
from commerce.infrastructure.logging import get_logger


logger = get_logger(__name__)


class OrderApplicationService:
    """
    Application service for orchestrating order operations.

    Responsibilities:
    - Coordinate domain + infrastructure
    - Handle transactions via UoW
    - Transform between DTOs and domain entities
    """

    def __init__(self, database: Database) -> None:
        """Initialize order application service.

        Args:
            database: Store context providing units of work
        """
        self._database = database

    async def place_order(self, request: PlaceOrderRequest) -> OrderDTO:
        """Place an order for an existing customer.

        Each line takes the product's current name and price as its
        snapshot. The order and the customer's reward points are saved in
        the same transaction.

        Args:
            request: PlaceOrderRequest DTO

        Returns:
            OrderDTO with created order details

        Raises:
            NotFoundError: Unknown customer or product
            PersistenceError: Store constraint violated
        """
        async with self._database.unit_of_work() as uow:
            customer = await uow.customers.find(request.customer_id)

            items = []
            for line in request.lines:
                product = await uow.products.find(line.product_id)
                items.append(
                    OrderItem(
                        id=str(uuid.uuid4()),
                        name=product.name,
                        price=product.price,
                        product_id=product.id,
                        quantity=line.quantity,
                    )
                )

            order = OrderService.place_order(customer, items)

            await uow.orders.create(order)
            await uow.customers.update(customer)
            await uow.commit()

        logger.info(f"Order {order.id} placed for customer {customer.id}: total {order.total()}")

        return self._order_to_dto(order)

    async def get_order(self, order_id: str) -> OrderDTO:
        """Get order by ID; raises NotFoundError when missing."""
        async with self._database.unit_of_work() as uow:
            order = await uow.orders.find(order_id)
            return self._order_to_dto(order)

    async def list_orders(self) -> List[OrderDTO]:
        async with self._database.unit_of_work() as uow:
            orders = await uow.orders.find_all()
            return [self._order_to_dto(order) for order in orders]

    def _order_to_dto(self, order: Order) -> OrderDTO:
        """Transform Order domain entity to OrderDTO.

        Args:
            order: Order domain entity

        Returns:
            OrderDTO instance
        """
        items = [
            OrderItemDTO(
                id=item.id,
                name=item.name,
                price=item.price,
                product_id=item.product_id,
                quantity=item.quantity,
            )
            for item in order.items
        ]

        return OrderDTO(
            id=order.id,
            customer_id=order.customer_id,
            items=items,
            total=order.total(),
        )
