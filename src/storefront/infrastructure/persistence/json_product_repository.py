"""JSON-document-backed implementation of ProductRepository.

Operates on the staged copy of the ``products`` collection owned by a
JsonUnitOfWork; nothing reaches the file until that unit commits.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from storefront.domain.model.product import Product, VariantOption
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, documents: dict[str, dict]) -> None:
        self._documents = documents

    # --- ProductRepository interface ------------------------------------------

    async def get_by_id(self, product_id: str) -> Product | None:
        raw = self._documents.get(product_id)
        return self._to_domain(raw) if raw is not None else None

    async def get_by_name(self, name: str) -> Product | None:
        for raw in self._documents.values():
            if raw["name"].lower() == name.strip().lower():
                return self._to_domain(raw)
        return None

    async def save(self, product: Product) -> None:
        self._documents[product.id] = self._to_raw(product)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "description": product.description,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "base_color": product.base_color,
            "base_quantity": product.base_quantity,
            "options": [
                {
                    "color": option.color,
                    "color_code": option.color_code,
                    "quantity": option.quantity,
                    "price": str(option.price.amount) if option.price is not None else None,
                }
                for option in product.options
            ],
            "created_at": product.created_at.isoformat(),
            "updated_at": product.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        currency = raw.get("currency", "INR")
        return Product(
            id=raw["id"],
            name=raw["name"],
            description=raw.get("description", ""),
            price=Money(Decimal(raw["price"]), currency),
            base_color=raw.get("base_color", ""),
            base_quantity=raw["base_quantity"],
            options=[
                VariantOption(
                    color=o["color"],
                    color_code=o.get("color_code", ""),
                    quantity=o["quantity"],
                    price=Money(Decimal(o["price"]), currency) if o.get("price") is not None else None,
                )
                for o in raw.get("options", [])
            ],
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
