"""Static mappers for domain entities ↔ database models."""

from decimal import Decimal
from typing import List

from commerce.domain.entities import Customer, Order, OrderItem, Product
from commerce.domain.value_objects import Address

from .models import CustomerModel, OrderItemModel, OrderModel, ProductModel


class CustomerMapper:
    """Static mapper for Customer ↔ CustomerModel transformation."""

    @staticmethod
    def to_domain(model: CustomerModel) -> Customer:
        """Convert ORM model to domain entity.

        The address is rebuilt only when the street column is set.
        """
        address = None
        if model.street is not None:
            address = Address(
                street=model.street,
                number=model.number,
                zip=model.zipcode,
                city=model.city,
            )

        return Customer(
            id=model.id,
            name=model.name,
            address=address,
            active=bool(model.active),
            reward_points=Decimal(model.reward_points or "0"),
        )

    @staticmethod
    def to_persistence(entity: Customer) -> CustomerModel:
        model = CustomerModel(id=entity.id)
        return CustomerMapper.update_persistence(entity, model)

    @staticmethod
    def update_persistence(entity: Customer, model: CustomerModel) -> CustomerModel:
        """Copy every mutable field of the entity onto an existing model."""
        model.name = entity.name
        model.street = entity.address.street if entity.address else None
        model.number = entity.address.number if entity.address else None
        model.zipcode = entity.address.zip if entity.address else None
        model.city = entity.address.city if entity.address else None
        model.active = entity.active
        model.reward_points = str(entity.reward_points)
        return model


class ProductMapper:
    """Static mapper for Product ↔ ProductModel transformation."""

    @staticmethod
    def to_domain(model: ProductModel) -> Product:
        return Product(
            id=model.id,
            name=model.name,
            price=Decimal(model.price),
        )

    @staticmethod
    def to_persistence(entity: Product) -> ProductModel:
        return ProductModel(id=entity.id, name=entity.name, price=str(entity.price))

    @staticmethod
    def update_persistence(entity: Product, model: ProductModel) -> ProductModel:
        model.name = entity.name
        model.price = str(entity.price)
        return model


class OrderItemMapper:
    """Static mapper for OrderItem ↔ OrderItemModel transformation."""

    @staticmethod
    def to_domain(model: OrderItemModel) -> OrderItem:
        """Convert ORM model to domain entity.

        Args:
            model: OrderItemModel instance

        Returns:
            OrderItem domain entity
        """
        return OrderItem(
            id=model.id,
            name=model.name,
            price=Decimal(model.price),
            product_id=model.product_id,
            quantity=model.quantity,
        )

    @staticmethod
    def to_persistence(entity: OrderItem, order_id: str, position: int) -> OrderItemModel:
        """Convert domain entity to ORM model.

        Args:
            entity: OrderItem domain entity
            order_id: Owning order id
            position: Index of the item inside Order.items

        Returns:
            OrderItemModel instance
        """
        return OrderItemModel(
            id=entity.id,
            order_id=order_id,
            product_id=entity.product_id,
            name=entity.name,
            price=str(entity.price),
            quantity=entity.quantity,
            position=position,
        )


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with nested items."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate (with nested items).

        The stored total is not read back: Order.total() derives it from
        the items.

        Args:
            model: OrderModel instance with items loaded

        Returns:
            Order domain aggregate
        """
        item_models = sorted(model.items, key=lambda item: item.position)
        items = [OrderItemMapper.to_domain(item_model) for item_model in item_models]

        return Order(
            id=model.id,
            customer_id=model.customer_id,
            items=items,
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to ORM model (with nested items).

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance
        """
        order_model = OrderModel(
            id=entity.id,
            customer_id=entity.customer_id,
            total=str(entity.total()),
        )
        order_model.items = OrderMapper.items_to_persistence(entity)
        return order_model

    @staticmethod
    def items_to_persistence(entity: Order) -> List[OrderItemModel]:
        """Map every item of the aggregate, keeping its position."""
        return [
            OrderItemMapper.to_persistence(item, entity.id, position)
            for position, item in enumerate(entity.items)
        ]

    @staticmethod
    def update_persistence(entity: Order, model: OrderModel) -> OrderModel:
        """Update the parent row fields of an existing ORM model.

        Items are replaced separately by the repository (delete, flush,
        reinsert) so reused item ids never collide with the old rows.

        Args:
            entity: Order domain aggregate
            model: Existing OrderModel instance

        Returns:
            Updated OrderModel instance
        """
        model.customer_id = entity.customer_id
        model.total = str(entity.total())
        return model
