"""Product storage port.

Implementations are handed out by a UnitOfWork; writes made through
them are staged until that unit commits.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    async def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    async def get_by_name(self, name: str) -> Product | None:
        """Return a product by its exact name (case-insensitive), or None."""

    @abstractmethod
    async def save(self, product: Product) -> None:
        """Stage a new or updated product for the next commit."""
