"""Tests for the Order aggregate and OrderItem."""
from decimal import Decimal

import pytest

from commerce.domain.entities import Order, OrderItem
from commerce.domain.exceptions import ValidationError


def _item(item_id: str = "1", price=1050, quantity: int = 2, product_id: str = "123") -> OrderItem:
    return OrderItem(item_id, f"Product {product_id}", price, product_id, quantity)


class TestOrderItem:
    """OrderItem invariants."""

    def test_price_is_converted_to_decimal(self):
        item = OrderItem("1", "Product", 10.5, "p1", 1)
        assert item.price == Decimal("10.5")
        assert isinstance(item.price, Decimal)

    def test_item_total(self):
        assert _item(price=14, quantity=4).total() == Decimal("56")

    @pytest.mark.parametrize("quantity", [0, -1])
    def test_quantity_must_be_positive(self, quantity):
        with pytest.raises(ValidationError, match="Quantity must be greater than 0"):
            _item(quantity=quantity)

    def test_quantity_must_be_integer(self):
        with pytest.raises(ValidationError):
            _item(quantity=1.5)

    def test_price_must_not_be_negative(self):
        with pytest.raises(ValidationError, match="Price must not be negative"):
            _item(price=-1)

    def test_zero_price_is_allowed(self):
        assert _item(price=0).total() == 0

    def test_id_and_product_id_are_required(self):
        with pytest.raises(ValidationError):
            _item(item_id="")
        with pytest.raises(ValidationError):
            _item(product_id="")


class TestOrder:
    """Order construction and totals."""

    def test_total_for_single_item(self):
        order = Order("1", "1", [_item(price=1050, quantity=2)])
        assert order.total() == Decimal("2100")

    def test_total_sums_every_item(self):
        items = [
            OrderItem("1", "Product Z99", 1150, "Z99", 2),
            OrderItem("2", "Product S46", 567, "S46", 5),
        ]
        order = Order("1", "3", items)
        assert order.total() == Decimal("1150") * 2 + Decimal("567") * 5

    def test_total_handles_fractional_prices(self):
        items = [OrderItem("1", "A", "0.10", "a", 3), OrderItem("2", "B", "0.20", "b", 1)]
        assert Order("o1", "c1", items).total() == Decimal("0.50")

    def test_items_keep_their_order_and_are_read_only(self):
        first, second = _item("1"), _item("2", product_id="456")
        order = Order("1", "1", [first, second])

        assert order.items == (first, second)
        assert isinstance(order.items, tuple)
        with pytest.raises(AttributeError):
            order.items.append(_item("3"))

    def test_source_list_mutation_does_not_leak_into_order(self):
        items = [_item("1")]
        order = Order("1", "1", items)
        items.append(_item("2"))

        assert len(order.items) == 1
        assert order.total() == Decimal("2100")

    def test_order_is_immutable(self):
        order = Order("1", "1", [_item()])
        with pytest.raises(AttributeError):
            order.customer_id = "2"

    def test_id_is_required(self):
        with pytest.raises(ValidationError, match="Order id is required"):
            Order("", "1", [_item()])

    def test_customer_id_is_required(self):
        with pytest.raises(ValidationError, match="Customer id is required"):
            Order("1", "", [_item()])

    def test_items_are_required(self):
        with pytest.raises(ValidationError, match="at least one item"):
            Order("1", "1", [])

    def test_item_ids_must_be_unique(self):
        with pytest.raises(ValidationError, match="unique"):
            Order("1", "1", [_item("1"), _item("1", product_id="456")])

    def test_equality_is_structural(self):
        assert Order("1", "1", [_item()]) == Order("1", "1", [_item(price=Decimal("1050.00"))])
        assert Order("1", "1", [_item()]) != Order("1", "1", [_item(quantity=3)])
