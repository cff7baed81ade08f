"""Abstract repository for Inquiry aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.inquiry import Inquiry, InquiryStatus


class InquiryRepository(ABC):

    @abstractmethod
    async def get_by_id(self, inquiry_id: str) -> Inquiry | None:
        """Return an inquiry by its ID, or None if not found."""

    @abstractmethod
    async def find(
        self,
        status: InquiryStatus | None = None,
        product_id: str | None = None,
    ) -> list[Inquiry]:
        """Return every inquiry matching the given filters, unordered."""

    @abstractmethod
    async def save(self, inquiry: Inquiry) -> None:
        """Stage a new or updated inquiry for the next commit."""

    @abstractmethod
    async def delete(self, inquiry_id: str) -> None:
        """Stage removal of an inquiry."""
