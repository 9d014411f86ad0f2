"""Repository interface for Customer entity."""

from abc import ABC, abstractmethod
from typing import List

from ..entities.customer import Customer


class CustomerRepository(ABC):
    """Abstract repository for Customer persistence."""

    @abstractmethod
    async def create(self, customer: Customer) -> None:
        """Persist a new customer."""
        pass

    @abstractmethod
    async def update(self, customer: Customer) -> None:
        """Overwrite the stored customer with the entity's current state."""
        pass

    @abstractmethod
    async def find(self, customer_id: str) -> Customer:
        """Retrieve customer by id; raises NotFoundError when missing."""
        pass

    @abstractmethod
    async def find_all(self) -> List[Customer]:
        pass
