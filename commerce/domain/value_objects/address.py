"""Address value object."""
from dataclasses import dataclass

from ..exceptions import ValidationError


@dataclass(frozen=True)
class Address:
    """
    Postal address owned by a Customer.

    Immutable: changing a customer's address means assigning a new Address.
    """
    street: str
    number: int
    zip: str
    city: str

    def __post_init__(self):
        if not self.street:
            raise ValidationError("Street is required")
        if not isinstance(self.number, int) or self.number <= 0:
            raise ValidationError(f"Number must be a positive integer, got: {self.number}")
        if not self.zip:
            raise ValidationError("Zip is required")
        if not self.city:
            raise ValidationError("City is required")

    def __str__(self) -> str:
        return f"{self.street}, {self.number}, {self.zip} {self.city}"
