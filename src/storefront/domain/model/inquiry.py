"""Inquiry aggregate.

A customer's request to buy a quantity of one product variant. Staff move
it through its status lifecycle; arriving at COMPLETED for the first time
is the only transition with a side effect (stock deduction), which is
coordinated by the application layer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Quantity


class InquiryStatus(Enum):
    PENDING = "Pending"
    CONTACTED = "Contacted"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class BuyOption(Enum):
    PERSONAL = "Personal"
    WHOLESALE = "Wholesale"
    OTHER = "Other"


# Fields staff may change after creation. Stock-relevant fields
# (product, variant, quantity) are fixed at submission.
UPDATABLE_FIELDS = (
    "status",
    "admin_notes",
    "message",
    "location",
    "company_name",
    "user_name",
    "user_email",
    "whatsapp_number",
    "buy_option",
)


@dataclass
class Inquiry:
    """Aggregate root for customer inquiries.

    Use ``Inquiry.create()`` for new inquiries. The ``__init__`` stays
    plain so repositories can reconstitute stored inquiries as-is.
    """

    id: str
    product_id: str
    product_name: str
    variant: str
    quantity: Quantity
    user_name: str
    user_email: str
    whatsapp_number: str
    location: str
    buy_option: BuyOption
    status: InquiryStatus = InquiryStatus.PENDING
    company_name: str = ""
    product_image: str = ""
    message: str = ""
    admin_notes: str = ""
    stock_deducted: bool = False  # set once, never cleared
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW inquiries only) --------------------------------

    @staticmethod
    def create(
        inquiry_id: str,
        product_id: str,
        product_name: str,
        quantity: Quantity,
        user_name: str,
        user_email: str,
        whatsapp_number: str,
        location: str,
        buy_option: BuyOption,
        variant: str = "",
        company_name: str = "",
        product_image: str = "",
        message: str = "",
    ) -> Inquiry:
        """Create a new inquiry at PENDING."""
        if buy_option is BuyOption.WHOLESALE and not company_name.strip():
            raise ValidationError(
                "Company name is required for wholesale inquiries",
                {"companyName": "Company name is required for wholesale inquiries"},
            )
        return Inquiry(
            id=inquiry_id,
            product_id=product_id,
            product_name=product_name,
            variant=variant.strip(),
            quantity=quantity,
            user_name=user_name,
            user_email=user_email,
            whatsapp_number=whatsapp_number,
            location=location,
            buy_option=buy_option,
            company_name=company_name,
            product_image=product_image,
            message=message,
        )

    # --- State transitions ----------------------------------------------------

    @property
    def is_completed(self) -> bool:
        return self.status is InquiryStatus.COMPLETED

    def completes_with(self, new_status: InquiryStatus | None) -> bool:
        """True when moving to ``new_status`` is the first arrival at COMPLETED.

        An inquiry that left COMPLETED and comes back does not qualify;
        its stock was already taken.
        """
        return (
            new_status is InquiryStatus.COMPLETED
            and not self.is_completed
            and not self.stock_deducted
        )

    def mark_stock_deducted(self) -> None:
        if self.stock_deducted:
            raise ValidationError(f"Stock for inquiry {self.id} was already deducted")
        self.stock_deducted = True

    def apply_update(self, changes: dict) -> None:
        """Apply already-validated staff edits.

        Stock deduction for a completion must happen *before* calling
        this (coordinated by the update handler inside a unit of work).
        """
        unknown = set(changes) - set(UPDATABLE_FIELDS)
        if unknown:
            raise ValidationError(
                f"Field(s) not updatable: {', '.join(sorted(unknown))}"
            )
        buy_option = changes.get("buy_option", self.buy_option)
        company_name = changes.get("company_name", self.company_name)
        if buy_option is BuyOption.WHOLESALE and not company_name.strip():
            raise ValidationError(
                "Company name is required for wholesale inquiries",
                {"companyName": "Company name is required for wholesale inquiries"},
            )

        for name, value in changes.items():
            setattr(self, name, value)
        self.updated_at = datetime.now(timezone.utc)
