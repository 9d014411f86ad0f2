"""Domain service for bulk product operations."""
from decimal import ROUND_HALF_UP, Decimal
from typing import List

from ..entities.product import Product
from ..value_objects import CENTS, AmountLike, to_amount


class ProductService:

    @staticmethod
    def increase_price(products: List[Product], percentage: AmountLike) -> List[Product]:
        """
        Raise every product price by `percentage` percent.

        Prices are rounded half-up to cents. Negative percentages lower the
        price; Product.change_price still rejects results below zero.
        """
        factor = 1 + to_amount(percentage, "percentage") / Decimal("100")
        for product in products:
            new_price = (product.price * factor).quantize(CENTS, rounding=ROUND_HALF_UP)
            product.change_price(new_price)
        return products
