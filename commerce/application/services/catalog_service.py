"""Application services for customers and products."""

from decimal import Decimal
from typing import List, Optional

from commerce.data import Database
from commerce.domain.entities import Customer, Product
from commerce.domain.event_dispatcher import EventDispatcher
from commerce.domain.services import ProductService
from commerce.domain.value_objects import Address, AmountLike
from commerce.infrastructure.logging import get_logger


logger = get_logger(__name__)


class CustomerApplicationService:
    """
    Registers customers and changes their addresses.

    Domain events collected on the entity are handed to the dispatcher only
    after the transaction commits.
    """

    def __init__(self, database: Database, dispatcher: Optional[EventDispatcher] = None) -> None:
        self._database = database
        self._dispatcher = dispatcher

    async def register_customer(
        self,
        customer_id: str,
        name: str,
        address: Optional[Address] = None,
    ) -> Customer:
        """Create a customer; with an address it is also activated."""
        customer = Customer.create(customer_id, name)
        if address is not None:
            customer.change_address(address)
            customer.activate()

        async with self._database.unit_of_work() as uow:
            await uow.customers.create(customer)
            await uow.commit()

        logger.info(f"Customer registered: {customer.id}")
        await self._publish(customer)
        return customer

    async def change_address(self, customer_id: str, address: Address) -> Customer:
        async with self._database.unit_of_work() as uow:
            customer = await uow.customers.find(customer_id)
            customer.change_address(address)
            await uow.customers.update(customer)
            await uow.commit()

        await self._publish(customer)
        return customer

    async def _publish(self, customer: Customer) -> None:
        events = customer.pull_domain_events()
        if self._dispatcher is not None:
            await self._dispatcher.notify_all(events)


class ProductApplicationService:
    """Adds products to the catalog and applies bulk price changes."""

    def __init__(self, database: Database, dispatcher: Optional[EventDispatcher] = None) -> None:
        self._database = database
        self._dispatcher = dispatcher

    async def add_product(self, product_id: str, name: str, price: AmountLike) -> Product:
        product = Product.create(product_id, name, price)

        async with self._database.unit_of_work() as uow:
            await uow.products.create(product)
            await uow.commit()

        events = product.pull_domain_events()
        if self._dispatcher is not None:
            await self._dispatcher.notify_all(events)
        return product

    async def increase_prices(self, percentage: AmountLike) -> List[Product]:
        """Raise the price of every product in the catalog by `percentage` percent."""
        async with self._database.unit_of_work() as uow:
            products = ProductService.increase_price(await uow.products.find_all(), percentage)
            for product in products:
                await uow.products.update(product)
            await uow.commit()

        logger.info(f"Increased {len(products)} product prices by {Decimal(str(percentage))}%")
        return products
