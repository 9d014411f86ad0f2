"""Customer repository tests against in-memory SQLite."""
from decimal import Decimal

import pytest

from commerce.domain.entities import Customer
from commerce.domain.exceptions import NotFoundError, PersistenceError
from commerce.domain.value_objects import Address


@pytest.mark.asyncio
async def test_create_and_find_customer(database):
    customer = Customer(id="123", name="Customer 1")
    customer.change_address(Address("Street 1", 1, "Zipcode 1", "City 1"))

    async with database.unit_of_work() as uow:
        await uow.customers.create(customer)
        await uow.commit()

    async with database.unit_of_work() as uow:
        found = await uow.customers.find("123")

    assert found == customer
    assert found.address == Address("Street 1", 1, "Zipcode 1", "City 1")
    assert not found.is_active()


@pytest.mark.asyncio
async def test_customer_without_address(database):
    customer = Customer(id="1", name="No Address")

    async with database.unit_of_work() as uow:
        await uow.customers.create(customer)
        await uow.commit()

    async with database.unit_of_work() as uow:
        found = await uow.customers.find("1")

    assert found.address is None
    assert found == customer


@pytest.mark.asyncio
async def test_update_customer(database):
    customer = Customer(id="123", name="Customer 1")
    customer.change_address(Address("Street 1", 1, "Zipcode 1", "City 1"))

    async with database.unit_of_work() as uow:
        await uow.customers.create(customer)
        await uow.commit()

    customer.change_name("Customer 2")
    customer.activate()
    customer.add_reward_points(25)

    async with database.unit_of_work() as uow:
        await uow.customers.update(customer)
        await uow.commit()

    async with database.unit_of_work() as uow:
        found = await uow.customers.find("123")

    assert found.name == "Customer 2"
    assert found.is_active()
    assert found.reward_points == Decimal("25")


@pytest.mark.asyncio
async def test_find_unknown_customer_raises(database):
    async with database.unit_of_work() as uow:
        with pytest.raises(NotFoundError, match="Customer not found: 456ABC"):
            await uow.customers.find("456ABC")


@pytest.mark.asyncio
async def test_update_unknown_customer_raises(database):
    async with database.unit_of_work() as uow:
        with pytest.raises(NotFoundError):
            await uow.customers.update(Customer(id="nobody", name="Nobody"))


@pytest.mark.asyncio
async def test_create_duplicate_customer_raises(database, seed_customer):
    await seed_customer("1", "Customer 1")

    async with database.unit_of_work() as uow:
        with pytest.raises(PersistenceError):
            await uow.customers.create(Customer(id="1", name="Again"))


@pytest.mark.asyncio
async def test_find_all_customers(database):
    customer1 = Customer(id="1", name="Customer 1")
    customer2 = Customer(id="2", name="Customer 2")
    customer2.add_reward_points(20)

    async with database.unit_of_work() as uow:
        await uow.customers.create(customer1)
        await uow.customers.create(customer2)
        await uow.commit()

    async with database.unit_of_work() as uow:
        customers = await uow.customers.find_all()

    assert customers == [customer1, customer2]


@pytest.mark.asyncio
async def test_reward_points_are_not_rounded(database):
    customer = Customer(id="1", name="Customer 1")
    customer.add_reward_points(Decimal("0.025"))

    async with database.unit_of_work() as uow:
        await uow.customers.create(customer)
        await uow.commit()

    # Half of an odd cent total
    customer.add_reward_points(Decimal("0.05") / 2)

    async with database.unit_of_work() as uow:
        await uow.customers.update(customer)
        await uow.commit()

    async with database.unit_of_work() as uow:
        found = await uow.customers.find("1")

    assert found == customer
    assert found.reward_points == Decimal("0.050")
