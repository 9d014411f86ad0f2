"""Repository interface for Product entity."""

from abc import ABC, abstractmethod
from typing import List

from ..entities.product import Product


class ProductRepository(ABC):
    """Abstract repository for Product persistence."""

    @abstractmethod
    async def create(self, product: Product) -> None:
        """Persist a new product."""
        pass

    @abstractmethod
    async def update(self, product: Product) -> None:
        """Overwrite the stored product (name, price)."""
        pass

    @abstractmethod
    async def find(self, product_id: str) -> Product:
        """Retrieve product by id; raises NotFoundError when missing."""
        pass

    @abstractmethod
    async def find_all(self) -> List[Product]:
        pass
