"""UnitOfWork over a JsonDocumentStore.

Entering the scope takes the store locks (in-process and on-disk) and
reads a private copy of every collection; repositories stage writes into
that copy. ``commit`` writes the whole copy back in one atomic replace.
The locks are held until the scope exits, which serializes every
read-check-write sequence, also against other processes on the same file.
"""

from __future__ import annotations

import logging

from storefront.domain.exceptions import TransactionAbortedError
from storefront.domain.repository.unit_of_work import UnitOfWork
from storefront.infrastructure.persistence.json_document_store import JsonDocumentStore
from storefront.infrastructure.persistence.json_inquiry_repository import (
    JsonInquiryRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

logger = logging.getLogger(__name__)


class JsonUnitOfWork(UnitOfWork):

    def __init__(self, store: JsonDocumentStore) -> None:
        self._store = store
        self._staged: dict[str, dict[str, dict]] | None = None

    async def __aenter__(self) -> JsonUnitOfWork:
        await self._store.acquire()
        try:
            self._staged = await self._store.read()
        except BaseException:
            self._store.release()
            raise
        self.products = JsonProductRepository(self._staged["products"])
        self.inquiries = JsonInquiryRepository(self._staged["inquiries"])
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        try:
            await self.rollback()
        finally:
            self._store.release()

    async def commit(self) -> None:
        if self._staged is None:
            raise TransactionAbortedError("Unit of work is not active")
        try:
            await self._store.write(self._staged)
        except OSError as exc:
            logger.error(f"Commit to {self._store.file_path} failed: {exc}")
            raise TransactionAbortedError("Could not persist changes") from exc

    async def rollback(self) -> None:
        # Staged documents are a private copy; dropping them is the rollback.
        self._staged = None
