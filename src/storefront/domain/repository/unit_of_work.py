"""Abstract unit of work: one transaction scope over both aggregates.

Usage::

    async with uow:
        product = await uow.products.get_by_id(pid)
        ...
        await uow.products.save(product)
        await uow.inquiries.save(inquiry)
        await uow.commit()

Writes are staged until ``commit()``; they become visible together or
not at all. Leaving the block without committing (including by an
exception) rolls everything back. Implementations serialize scopes that
touch the same products so a read-check-write sequence cannot interleave
with another one.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from storefront.domain.repository.inquiry_repository import InquiryRepository
from storefront.domain.repository.product_repository import ProductRepository


class UnitOfWork(ABC):

    products: ProductRepository
    inquiries: InquiryRepository

    async def __aenter__(self) -> UnitOfWork:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.rollback()

    @abstractmethod
    async def commit(self) -> None:
        """Persist every staged write atomically.

        Raises TransactionAbortedError if nothing could be persisted.
        """

    @abstractmethod
    async def rollback(self) -> None:
        """Discard every staged write. A no-op after a successful commit."""


UnitOfWorkFactory = Callable[[], UnitOfWork]
