"""Application service: Show Inquiry use case (query)."""

from __future__ import annotations

from storefront.application.dto import InquiryDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory


class ShowInquiryHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def handle(self, inquiry_id: str) -> InquiryDTO:
        async with self._uow_factory() as uow:
            inquiry = await uow.inquiries.get_by_id(inquiry_id)
        if inquiry is None:
            raise EntityNotFoundError(f"Inquiry '{inquiry_id}' not found")
        return InquiryDTO.from_domain(inquiry)
