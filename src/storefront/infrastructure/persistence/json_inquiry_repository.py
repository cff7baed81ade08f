"""JSON-document-backed implementation of InquiryRepository."""

from __future__ import annotations

from datetime import datetime

from storefront.domain.model.inquiry import BuyOption, Inquiry, InquiryStatus
from storefront.domain.model.value_objects import Quantity
from storefront.domain.repository.inquiry_repository import InquiryRepository


class JsonInquiryRepository(InquiryRepository):

    def __init__(self, documents: dict[str, dict]) -> None:
        self._documents = documents

    # --- InquiryRepository interface ------------------------------------------

    async def get_by_id(self, inquiry_id: str) -> Inquiry | None:
        raw = self._documents.get(inquiry_id)
        return self._to_domain(raw) if raw is not None else None

    async def find(
        self,
        status: InquiryStatus | None = None,
        product_id: str | None = None,
    ) -> list[Inquiry]:
        return [
            self._to_domain(raw)
            for raw in self._documents.values()
            if (status is None or raw["status"] == status.value)
            and (product_id is None or raw["product_id"] == product_id)
        ]

    async def save(self, inquiry: Inquiry) -> None:
        self._documents[inquiry.id] = self._to_raw(inquiry)

    async def delete(self, inquiry_id: str) -> None:
        self._documents.pop(inquiry_id, None)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(inquiry: Inquiry) -> dict:
        return {
            "id": inquiry.id,
            "product_id": inquiry.product_id,
            "product_name": inquiry.product_name,
            "product_image": inquiry.product_image,
            "variant": inquiry.variant,
            "quantity": inquiry.quantity.value,
            "status": inquiry.status.value,
            "buy_option": inquiry.buy_option.value,
            "user_name": inquiry.user_name,
            "user_email": inquiry.user_email,
            "whatsapp_number": inquiry.whatsapp_number,
            "location": inquiry.location,
            "company_name": inquiry.company_name,
            "message": inquiry.message,
            "admin_notes": inquiry.admin_notes,
            "stock_deducted": inquiry.stock_deducted,
            "created_at": inquiry.created_at.isoformat(),
            "updated_at": inquiry.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Inquiry:
        return Inquiry(
            id=raw["id"],
            product_id=raw["product_id"],
            product_name=raw.get("product_name", ""),
            product_image=raw.get("product_image", ""),
            variant=raw.get("variant", ""),
            quantity=Quantity(raw["quantity"]),
            status=InquiryStatus(raw["status"]),
            buy_option=BuyOption(raw["buy_option"]),
            user_name=raw["user_name"],
            user_email=raw["user_email"],
            whatsapp_number=raw["whatsapp_number"],
            location=raw["location"],
            company_name=raw.get("company_name", ""),
            message=raw.get("message", ""),
            admin_notes=raw.get("admin_notes", ""),
            stock_deducted=raw.get("stock_deducted", False),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
