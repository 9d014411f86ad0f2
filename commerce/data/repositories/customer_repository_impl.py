"""SQLAlchemy implementation of CustomerRepository."""

from typing import List
import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from commerce.domain.entities import Customer
from commerce.domain.repositories import CustomerRepository

from ..mappers import CustomerMapper
from ..models import CustomerModel
from .base import SqlAlchemyRepository


logger = logging.getLogger(__name__)


class SqlAlchemyCustomerRepository(SqlAlchemyRepository[CustomerModel], CustomerRepository):
    """Concrete implementation of CustomerRepository using SQLAlchemy."""

    entity_name = "Customer"

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, CustomerModel)

    async def create(self, customer: Customer) -> None:
        logger.info(f"Creating customer: {customer.id}")
        await self._ensure_absent(customer.id)
        self._session.add(CustomerMapper.to_persistence(customer))
        await self._flush("create", customer.id)

    async def update(self, customer: Customer) -> None:
        logger.info(f"Updating customer: {customer.id}")
        model = await self._get_or_raise(customer.id)
        CustomerMapper.update_persistence(customer, model)
        await self._flush("update", customer.id)

    async def find(self, customer_id: str) -> Customer:
        model = await self._get_or_raise(customer_id)
        return CustomerMapper.to_domain(model)

    async def find_all(self) -> List[Customer]:
        result = await self._session.execute(select(CustomerModel).order_by(CustomerModel.id))
        customers = [CustomerMapper.to_domain(model) for model in result.scalars().all()]
        logger.info(f"Found {len(customers)} customers")
        return customers
