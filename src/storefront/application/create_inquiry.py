"""Application service: Create Inquiry use case.

Validates the submission, checks the product and variant exist, stores
the inquiry at PENDING and then fires the customer notification in the
background. A failed notification is logged and forgotten; it never
undoes the inquiry.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from uuid import uuid4

from storefront.application.dto import InquiryDTO
from storefront.application.notifier import InquiryNotifier
from storefront.application.schemas import CreateInquiryRequest, validate_payload
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.inquiry import Inquiry
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.domain.service.variant_resolver import resolve_stock_pool

logger = logging.getLogger(__name__)


class CreateInquiryHandler:

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        notifier: InquiryNotifier | None = None,
    ) -> None:
        self._uow_factory = uow_factory
        self._notifier = notifier
        # Strong references so running notifications are not garbage collected.
        self.notification_tasks: set[asyncio.Task] = set()

    async def handle(self, payload: dict[str, Any]) -> InquiryDTO:
        request = validate_payload(CreateInquiryRequest, payload)

        async with self._uow_factory() as uow:
            product = await uow.products.get_by_id(request.product_id)
            if product is None:
                raise EntityNotFoundError("Product does not exist")

            # Only checks the label; stock is not looked at until completion.
            resolve_stock_pool(product, request.variant)

            inquiry = Inquiry.create(
                inquiry_id=uuid4().hex,
                product_id=product.id,
                product_name=request.product_name or product.name,
                quantity=Quantity(request.quantity),
                user_name=request.user_name,
                user_email=request.user_email,
                whatsapp_number=request.whatsapp_number,
                location=request.location,
                buy_option=request.buy_option,
                variant=request.variant,
                company_name=request.company_name,
                product_image=request.product_image,
                message=request.message,
            )
            await uow.inquiries.save(inquiry)
            await uow.commit()

        logger.info(f"Inquiry {inquiry.id} created for product {product.id}")
        self._notify_in_background(inquiry, product)
        return InquiryDTO.from_domain(inquiry)

    # --- Notification ---------------------------------------------------------

    def _notify_in_background(self, inquiry: Inquiry, product: Product) -> None:
        if self._notifier is None:
            return
        task = asyncio.create_task(self._notify(inquiry, product))
        self.notification_tasks.add(task)
        task.add_done_callback(self.notification_tasks.discard)

    async def _notify(self, inquiry: Inquiry, product: Product) -> None:
        try:
            await self._notifier.send_inquiry_thank_you(inquiry, product)
        except Exception as exc:
            logger.error(f"Failed to send notification for inquiry {inquiry.id}: {exc}")
