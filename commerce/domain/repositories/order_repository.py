"""Repository interface for Order aggregate."""

from abc import ABC, abstractmethod
from typing import List

from ..entities.order import Order


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def create(self, order: Order) -> None:
        """Persist a new order together with all of its items.

        Args:
            order: Order aggregate to persist

        Raises:
            PersistenceError: Duplicate id or unknown customer/product reference
        """
        pass

    @abstractmethod
    async def update(self, order: Order) -> None:
        """Replace the stored order and its full item set.

        Args:
            order: Order aggregate carrying the complete desired item list

        Raises:
            NotFoundError: If no order with this id exists
            PersistenceError: On constraint violation
        """
        pass

    @abstractmethod
    async def find(self, order_id: str) -> Order:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order identifier

        Returns:
            Rebuilt Order aggregate

        Raises:
            NotFoundError: If no order matches
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Order]:
        """Retrieve every stored order with its items."""
        pass
