"""Unit of Work transaction scope tests."""
import pytest

from commerce.data import UnitOfWork
from commerce.domain.entities import Customer, Order, OrderItem
from commerce.domain.exceptions import NotFoundError, PersistenceError


@pytest.mark.asyncio
async def test_changes_without_commit_are_discarded(database):
    async with database.unit_of_work() as uow:
        await uow.customers.create(Customer(id="1", name="Customer 1"))

    async with database.unit_of_work() as uow:
        with pytest.raises(NotFoundError):
            await uow.customers.find("1")


@pytest.mark.asyncio
async def test_exception_rolls_back(database):
    with pytest.raises(RuntimeError):
        async with database.unit_of_work() as uow:
            await uow.customers.create(Customer(id="1", name="Customer 1"))
            raise RuntimeError("boom")

    async with database.unit_of_work() as uow:
        assert await uow.customers.find_all() == []


@pytest.mark.asyncio
async def test_repositories_share_the_session(database):
    async with database.unit_of_work() as uow:
        assert uow.orders is uow.orders
        assert uow.customers._session is uow.session
        assert uow.products._session is uow.session
        assert uow.orders._session is uow.session


@pytest.mark.asyncio
async def test_repositories_require_context(database):
    uow = UnitOfWork(database.session_factory)
    with pytest.raises(RuntimeError, match="not initialized"):
        uow.orders


@pytest.mark.asyncio
async def test_failed_write_discards_earlier_uncommitted_work(database):
    async with database.unit_of_work() as uow:
        await uow.customers.create(Customer(id="1", name="Customer 1"))

        with pytest.raises(PersistenceError):
            await uow.orders.create(Order("o1", "missing", [OrderItem("1", "Product 1", 10, "p1", 1)]))

        await uow.commit()

    async with database.unit_of_work() as uow:
        with pytest.raises(NotFoundError):
            await uow.customers.find("1")
