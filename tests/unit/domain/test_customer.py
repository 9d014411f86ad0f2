"""Tests for Customer entity and Address value object."""
from decimal import Decimal

import pytest

from commerce.domain.entities import Customer
from commerce.domain.events import CustomerAddressChangedEvent, CustomerCreatedEvent
from commerce.domain.exceptions import ValidationError
from commerce.domain.value_objects import Address


@pytest.fixture
def address() -> Address:
    return Address("Street 1", 123, "13330-250", "São Paulo")


class TestAddress:

    def test_address_is_immutable(self, address):
        with pytest.raises(AttributeError):
            address.city = "Other"

    def test_str(self, address):
        assert str(address) == "Street 1, 123, 13330-250 São Paulo"

    @pytest.mark.parametrize(
        "street, number, zip_code, city",
        [
            ("", 1, "z", "c"),
            ("s", 0, "z", "c"),
            ("s", 1, "", "c"),
            ("s", 1, "z", ""),
        ],
    )
    def test_invalid_address(self, street, number, zip_code, city):
        with pytest.raises(ValidationError):
            Address(street, number, zip_code, city)


class TestCustomer:

    def test_id_is_required(self):
        with pytest.raises(ValidationError, match="Customer id is required"):
            Customer(id="", name="John")

    def test_name_is_required(self):
        with pytest.raises(ValidationError, match="Customer name is required"):
            Customer(id="1", name="")

    def test_change_name(self):
        customer = Customer(id="1", name="John")
        customer.change_name("Jane")
        assert customer.name == "Jane"

        with pytest.raises(ValidationError):
            customer.change_name("")

    def test_activate_requires_address(self):
        customer = Customer(id="1", name="Customer 1")
        with pytest.raises(ValidationError, match="Address is mandatory"):
            customer.activate()
        assert not customer.is_active()

    def test_activate_and_deactivate(self, address):
        customer = Customer(id="1", name="Customer 1")
        customer.change_address(address)

        customer.activate()
        assert customer.is_active()

        customer.deactivate()
        assert not customer.is_active()

    def test_add_reward_points(self):
        customer = Customer(id="1", name="Customer 1")
        assert customer.reward_points == 0

        customer.add_reward_points(10)
        assert customer.reward_points == Decimal("10")

        customer.add_reward_points("10.5")
        assert customer.reward_points == Decimal("20.5")

    def test_negative_reward_points_rejected(self):
        customer = Customer(id="1", name="Customer 1")
        with pytest.raises(ValidationError):
            customer.add_reward_points(-1)

    def test_create_records_created_event(self):
        customer = Customer.create("1", "Customer 1")

        events = customer.pull_domain_events()
        assert len(events) == 1
        assert isinstance(events[0], CustomerCreatedEvent)
        assert events[0].aggregate_id == "1"
        assert events[0].aggregate_type == "Customer"
        assert customer.pull_domain_events() == []

    def test_change_address_records_event(self, address):
        customer = Customer(id="1", name="Customer 1")
        customer.change_address(address)

        [event] = customer.pull_domain_events()
        assert isinstance(event, CustomerAddressChangedEvent)
        assert event.event_type == "CustomerAddressChangedEvent"
        assert event.address == str(address)
        assert event.to_dict()["data"]["customer_id"] == "1"

    def test_events_do_not_affect_equality(self):
        assert Customer.create("1", "Customer 1") == Customer(id="1", name="Customer 1")
