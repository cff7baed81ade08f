"""Request schemas: the validation gate in front of every use case.

Payloads arrive as camelCase JSON objects. Unknown keys are stripped
silently, never rejected, so clients can send whole documents to an
update endpoint and only the allowlisted fields get through.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional, TypeVar

import pydantic
from pydantic import BaseModel, ConfigDict, EmailStr, Field

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.inquiry import BuyOption, InquiryStatus

PHONE_PATTERN = r"^\+?[1-9]\d{1,14}$"

Schema = TypeVar("Schema", bound=BaseModel)


class _Request(BaseModel):
    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class CreateInquiryRequest(_Request):
    user_name: str = Field(alias="userName", min_length=1, max_length=100)
    user_email: EmailStr = Field(alias="userEmail")
    whatsapp_number: str = Field(alias="whatsappNumber", pattern=PHONE_PATTERN)
    buy_option: BuyOption = Field(alias="buyOption")
    location: str = Field(min_length=1, max_length=300)
    quantity: int = Field(ge=1)
    product_id: str = Field(alias="productId", min_length=1)
    product_name: str = Field("", alias="productName", max_length=200)
    product_image: str = Field("", alias="productImage", max_length=1000)
    variant: str = Field("", max_length=50)
    company_name: str = Field("", alias="companyName", max_length=100)
    message: str = Field("", max_length=500)


class UpdateInquiryRequest(_Request):
    """Allowlist of staff-editable fields; everything else is dropped."""

    status: Optional[InquiryStatus] = None
    admin_notes: Optional[str] = Field(None, alias="adminNotes", max_length=500)
    message: Optional[str] = Field(None, max_length=500)
    location: Optional[str] = Field(None, min_length=1, max_length=300)
    company_name: Optional[str] = Field(None, alias="companyName", max_length=100)
    user_name: Optional[str] = Field(None, alias="userName", min_length=1, max_length=100)
    user_email: Optional[EmailStr] = Field(None, alias="userEmail")
    whatsapp_number: Optional[str] = Field(
        None, alias="whatsappNumber", pattern=PHONE_PATTERN
    )
    buy_option: Optional[BuyOption] = Field(None, alias="buyOption")

    def changes(self) -> dict[str, Any]:
        """Only the fields the client actually sent."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class VariantOptionRequest(_Request):
    color: str = Field(min_length=1, max_length=50)
    color_code: str = Field("", alias="colorCode", max_length=20)
    quantity: int = Field(ge=0)
    price: Optional[Decimal] = Field(None, ge=0)


class CreateProductRequest(_Request):
    name: str = Field(min_length=1, max_length=100)
    description: str = Field("", max_length=5000)
    price: Decimal = Field(ge=0)
    base_color: str = Field("", alias="baseColor", max_length=50)
    base_quantity: int = Field(alias="baseQuantity", ge=0)
    options: list[VariantOptionRequest] = Field(default_factory=list)


class SetStockRequest(_Request):
    variant: str = Field("", max_length=50)
    quantity: int = Field(ge=0)


def validate_payload(schema: type[Schema], payload: Any) -> Schema:
    """Validate ``payload`` against ``schema``.

    Raises the domain ValidationError carrying one message per failing
    field; the exception message is the first of them.
    """
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    try:
        return schema.model_validate(payload)
    except pydantic.ValidationError as exc:
        errors: dict[str, str] = {}
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"]) or "body"
            errors.setdefault(field, f"{field}: {error['msg']}")
        raise ValidationError(next(iter(errors.values())), errors) from exc
