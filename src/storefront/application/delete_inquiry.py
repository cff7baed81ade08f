"""Application service: Delete Inquiry use case.

Removal is unconditional: a completed inquiry can be deleted and the
stock it consumed stays consumed.
"""

from __future__ import annotations

import logging

from storefront.application.dto import InquiryDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory

logger = logging.getLogger(__name__)


class DeleteInquiryHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def handle(self, inquiry_id: str) -> InquiryDTO:
        """Delete an inquiry and return it as it was."""
        async with self._uow_factory() as uow:
            inquiry = await uow.inquiries.get_by_id(inquiry_id)
            if inquiry is None:
                raise EntityNotFoundError(f"Inquiry '{inquiry_id}' not found")
            await uow.inquiries.delete(inquiry_id)
            await uow.commit()

        logger.info(f"Inquiry {inquiry_id} deleted")
        return InquiryDTO.from_domain(inquiry)
