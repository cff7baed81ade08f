"""Money and Quantity.

Both are frozen dataclasses checked on construction, so a Product price
or an Inquiry quantity that exists is already valid.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError


@dataclass(frozen=True)
class Money:
    """A price in rupees.

    Stored as Decimal and persisted as a string, so ``1499.50`` survives
    the JSON round trip exactly.
    """

    amount: Decimal
    currency: str = "INR"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Price must be a Decimal, not {type(self.amount).__name__}"
            )
        if self.amount.is_nan() or self.amount < 0:
            raise ValidationError(f"Price cannot be negative: {self.amount}")

    def __str__(self) -> str:
        return f"₹{_indian_grouping(self.amount)}"

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Build from user or file input; ``str()`` first keeps floats exact."""
        try:
            value = Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Not a valid price: {amount!r}") from exc
        return Money(value)


def _indian_grouping(amount: Decimal) -> str:
    """Format like ``1,23,456.50``: last three digits, then pairs."""
    if amount == amount.to_integral_value():
        whole, fraction = str(int(amount)), ""
    else:
        whole, fraction = f"{amount:.2f}".split(".")
        fraction = "." + fraction

    if len(whole) <= 3:
        return whole + fraction

    head, tail = whole[:-3], whole[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail]) + fraction


@dataclass(frozen=True)
class Quantity:
    """How many units an inquiry asks for. Always a whole number ≥ 1."""

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass; True is not a quantity
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be a whole number, not {type(self.value).__name__}"
            )
        if self.value < 1:
            raise ValidationError("Quantity must be at least 1")

    def __str__(self) -> str:
        return f"{self.value}"
