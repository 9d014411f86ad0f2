"""Domain value objects."""

from .address import Address
from .amount import CENTS, AmountLike, to_amount

__all__ = [
    "Address",
    "AmountLike",
    "CENTS",
    "to_amount",
]
