"""StockPool: a handle onto one countable quantity of a Product.

A pool is either the product's primary quantity or the quantity of a
single variant option. It never copies the number; reads and writes go
straight to the owning Product, so the instance that was checked is the
instance that gets saved.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import InsufficientStockError, ValidationError
from storefront.domain.model.product import Product


@dataclass(frozen=True)
class StockPool:
    """Reference to a stock pool inside ``product``.

    Invariants:
    - ``quantity`` is never driven below zero by ``decrement``
    - a failed ``decrement`` leaves the product untouched
    """

    product: Product
    variant: str
    option_index: int | None = None  # None is the primary pool

    @property
    def is_primary(self) -> bool:
        return self.option_index is None

    @property
    def label(self) -> str:
        """Variant name shown to users."""
        return self.variant or self.product.base_color or "default"

    @property
    def quantity(self) -> int:
        if self.option_index is None:
            return self.product.base_quantity
        return self.product.options[self.option_index].quantity

    def _write(self, value: int) -> None:
        if self.option_index is None:
            self.product.base_quantity = value
        else:
            self.product.options[self.option_index].quantity = value
        self.product.touch()

    def decrement(self, amount: int) -> int:
        """Permanently deduct ``amount`` units and return the new quantity.

        Raises InsufficientStockError if the pool holds fewer units.
        """
        if amount <= 0:
            raise ValidationError("Deduction quantity must be positive")
        available = self.quantity
        if amount > available:
            raise InsufficientStockError(self.label, amount, available)
        self._write(available - amount)
        return available - amount

    def set(self, value: int) -> None:
        """Overwrite the pool quantity (stock intake / correction)."""
        if value < 0:
            raise ValidationError("Quantity cannot be negative")
        self._write(value)
