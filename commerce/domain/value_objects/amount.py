"""Monetary amount helpers - pure Python, Decimal only."""
from decimal import Decimal, InvalidOperation
from typing import Union

from ..exceptions import ValidationError

AmountLike = Union[Decimal, int, float, str]

CENTS = Decimal("0.01")


def to_amount(value: AmountLike, field_name: str = "amount") -> Decimal:
    """
    Convert a number to Decimal.

    Floats go through str() so 10.5 becomes Decimal("10.5") and not its
    binary expansion.

    Raises:
        ValidationError: If the value is not numeric
    """
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number, got: {value!r}")
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field_name} must be a number, got: {value!r}")
