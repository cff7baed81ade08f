"""Application service: List Inquiries use case (query)."""

from __future__ import annotations

import math

from storefront.application.dto import InquiryDTO, InquiryPageDTO, PaginationDTO
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.inquiry import Inquiry, InquiryStatus
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory

MAX_PAGE_SIZE = 100
DEFAULT_SORT = "-createdAt"

_SORT_KEYS = {
    "createdAt": lambda inquiry: inquiry.created_at,
    "quantity": lambda inquiry: inquiry.quantity.value,
    "status": lambda inquiry: inquiry.status.value,
}


class ListInquiriesHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def handle(
        self,
        status: str | None = None,
        product_id: str | None = None,
        page: int = 1,
        limit: int = 10,
        sort: str = DEFAULT_SORT,
    ) -> InquiryPageDTO:
        """Return one page of inquiries, filtered and sorted.

        ``sort`` is a field name, prefixed with ``-`` for descending.
        """
        if page < 1:
            raise ValidationError("Page must be at least 1")
        if not 1 <= limit <= MAX_PAGE_SIZE:
            raise ValidationError(f"Limit must be between 1 and {MAX_PAGE_SIZE}")

        status_filter = self._parse_status(status) if status else None

        async with self._uow_factory() as uow:
            inquiries = await uow.inquiries.find(
                status=status_filter, product_id=product_id or None
            )

        inquiries = self._sorted(inquiries, sort)
        total = len(inquiries)
        start = (page - 1) * limit
        return InquiryPageDTO(
            items=[InquiryDTO.from_domain(i) for i in inquiries[start:start + limit]],
            pagination=PaginationDTO(
                total=total,
                page=page,
                pages=math.ceil(total / limit),
                limit=limit,
            ),
        )

    @staticmethod
    def _parse_status(raw: str) -> InquiryStatus:
        try:
            return InquiryStatus(raw)
        except ValueError:
            allowed = ", ".join(s.value for s in InquiryStatus)
            raise ValidationError(f"Status must be one of {allowed}")

    @staticmethod
    def _sorted(inquiries: list[Inquiry], sort: str) -> list[Inquiry]:
        descending = sort.startswith("-")
        field = sort.lstrip("-")
        if field not in _SORT_KEYS:
            raise ValidationError(
                f"Cannot sort by '{field}'. Expected one of {', '.join(_SORT_KEYS)}"
            )
        return sorted(inquiries, key=_SORT_KEYS[field], reverse=descending)
