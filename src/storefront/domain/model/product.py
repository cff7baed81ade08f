"""Product aggregate.

Products live independently of inquiries. A product carries stock in
one or more pools: the primary pool (``base_quantity``, the color named
by ``base_color``) and one pool per entry in ``options``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money


@dataclass
class VariantOption:
    """A color variant with its own stock and optional price override."""

    color: str
    quantity: int
    price: Money | None = None  # None means "use the product's base price"
    color_code: str = ""


@dataclass
class Product:
    """A product in the catalog.

    This is an aggregate root; stock pools are reached through
    ``StockPool`` handles that write straight back into this instance.
    """

    id: str
    name: str
    price: Money
    base_quantity: int
    base_color: str = ""
    description: str = ""
    options: list[VariantOption] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        product_id: str,
        name: str,
        price: Money,
        base_quantity: int,
        base_color: str = "",
        description: str = "",
        options: list[VariantOption] | None = None,
    ) -> Product:
        """Create a new product, enforcing catalog invariants."""
        name = (name or "").strip()
        base_color = base_color.strip()
        if not name:
            raise ValidationError("Product name is required")
        if base_quantity < 0:
            raise ValidationError("Quantity cannot be negative")

        options = [replace(o, color=o.color.strip()) for o in options or []]
        seen: set[str] = set()
        for option in options:
            if option.quantity < 0:
                raise ValidationError(
                    f"Quantity cannot be negative for variant '{option.color}'"
                )
            if option.color in seen or option.color == base_color:
                raise ValidationError(f"Duplicate variant color '{option.color}'")
            seen.add(option.color)

        return Product(
            id=product_id,
            name=name,
            price=price,
            base_quantity=base_quantity,
            base_color=base_color,
            description=description.strip(),
            options=options,
        )

    # --- Queries --------------------------------------------------------------

    def find_option(self, color: str) -> int | None:
        """Index of the first option with this color, or None."""
        for index, option in enumerate(self.options):
            if option.color == color:
                return index
        return None

    def price_for(self, variant: str) -> Money:
        """Option price when the variant overrides it, else the base price."""
        index = self.find_option(variant) if variant else None
        if index is not None and self.options[index].price is not None:
            return self.options[index].price
        return self.price

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
