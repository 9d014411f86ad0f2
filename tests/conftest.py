"""Shared fixtures: one fresh in-memory SQLite database per test."""

from typing import AsyncGenerator, Awaitable, Callable

import pytest_asyncio

from commerce.data import Database
from commerce.domain.entities import Customer, Product
from commerce.domain.value_objects import Address
from commerce.settings import DatabaseSettings


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Create test database with all tables."""
    database = Database(DatabaseSettings(database_url=TEST_DATABASE_URL))
    await database.create_all()

    yield database

    # Cleanup
    await database.drop_all()
    await database.dispose()


@pytest_asyncio.fixture
async def seed_customer(database: Database) -> Callable[..., Awaitable[Customer]]:
    """Persist an active customer with an address and return it."""

    async def _seed(customer_id: str, name: str) -> Customer:
        customer = Customer(id=customer_id, name=name)
        customer.change_address(Address("Street 1", 250, "Zipcode 1-250", "City 1"))
        customer.activate()
        async with database.unit_of_work() as uow:
            await uow.customers.create(customer)
            await uow.commit()
        return customer

    return _seed


@pytest_asyncio.fixture
async def seed_products(database: Database) -> Callable[..., Awaitable[None]]:
    """Persist the given products in one transaction."""

    async def _seed(*products: Product) -> None:
        async with database.unit_of_work() as uow:
            for product in products:
                await uow.products.create(product)
            await uow.commit()

    return _seed
