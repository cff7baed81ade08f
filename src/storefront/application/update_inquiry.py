"""Application service: Update Inquiry use case.

Staff edits to an inquiry are plain field updates, except the first
arrival at COMPLETED: that one draws the inquiry's quantity from the
product's stock pool for its variant. Stock deduction and the inquiry
write are committed together in one unit of work, or not at all.

Leaving COMPLETED again never gives stock back.
"""

from __future__ import annotations

import logging
from typing import Any

from storefront.application.dto import InquiryDTO
from storefront.application.schemas import UpdateInquiryRequest, validate_payload
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.inquiry import Inquiry
from storefront.domain.repository.unit_of_work import UnitOfWork, UnitOfWorkFactory
from storefront.domain.service.variant_resolver import resolve_stock_pool

logger = logging.getLogger(__name__)


class UpdateInquiryHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def handle(self, inquiry_id: str, payload: dict[str, Any]) -> InquiryDTO:
        """Apply an allowlisted update, deducting stock on completion.

        Steps:
        1. Load the inquiry (fail if not found).
        2. Validate the payload; unknown fields are stripped.
        3. On first completion: load the product, resolve the variant's
           pool and deduct the inquiry quantity from it.
        4. Apply the changes and commit product + inquiry together.
        """
        async with self._uow_factory() as uow:
            inquiry = await uow.inquiries.get_by_id(inquiry_id)
            if inquiry is None:
                raise EntityNotFoundError(f"Inquiry '{inquiry_id}' not found")

            changes = validate_payload(UpdateInquiryRequest, payload).changes()

            if inquiry.completes_with(changes.get("status")):
                await self._deduct_stock(uow, inquiry)

            inquiry.apply_update(changes)
            await uow.inquiries.save(inquiry)
            await uow.commit()

        return InquiryDTO.from_domain(inquiry)

    @staticmethod
    async def _deduct_stock(uow: UnitOfWork, inquiry: Inquiry) -> None:
        product = await uow.products.get_by_id(inquiry.product_id)
        if product is None:
            logger.error(
                f"Inquiry {inquiry.id} references missing product {inquiry.product_id}"
            )
            raise EntityNotFoundError(f"Product '{inquiry.product_id}' not found")

        pool = resolve_stock_pool(product, inquiry.variant)
        remaining = pool.decrement(inquiry.quantity.value)
        inquiry.mark_stock_deducted()
        await uow.products.save(product)

        logger.info(
            f"Inquiry {inquiry.id} completed: deducted {inquiry.quantity} from "
            f"'{product.name}' ({pool.label}), {remaining} left"
        )
