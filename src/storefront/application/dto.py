"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI layers and the application layer
without exposing domain internals. ``to_json()`` renders the camelCase
shape API clients expect.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.inquiry import Inquiry
from storefront.domain.model.product import Product


@dataclass(frozen=True)
class InquiryDTO:
    id: str
    product_id: str
    product_name: str
    product_image: str
    variant: str
    quantity: int
    status: str
    buy_option: str
    user_name: str
    user_email: str
    whatsapp_number: str
    location: str
    company_name: str
    message: str
    admin_notes: str
    stock_deducted: bool
    created_at: str
    updated_at: str

    @staticmethod
    def from_domain(inquiry: Inquiry) -> InquiryDTO:
        return InquiryDTO(
            id=inquiry.id,
            product_id=inquiry.product_id,
            product_name=inquiry.product_name,
            product_image=inquiry.product_image,
            variant=inquiry.variant,
            quantity=inquiry.quantity.value,
            status=inquiry.status.value,
            buy_option=inquiry.buy_option.value,
            user_name=inquiry.user_name,
            user_email=inquiry.user_email,
            whatsapp_number=inquiry.whatsapp_number,
            location=inquiry.location,
            company_name=inquiry.company_name,
            message=inquiry.message,
            admin_notes=inquiry.admin_notes,
            stock_deducted=inquiry.stock_deducted,
            created_at=inquiry.created_at.isoformat(),
            updated_at=inquiry.updated_at.isoformat(),
        )

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "productId": self.product_id,
            "productName": self.product_name,
            "productImage": self.product_image,
            "variant": self.variant,
            "quantity": self.quantity,
            "status": self.status,
            "buyOption": self.buy_option,
            "userName": self.user_name,
            "userEmail": self.user_email,
            "whatsappNumber": self.whatsapp_number,
            "location": self.location,
            "companyName": self.company_name,
            "message": self.message,
            "adminNotes": self.admin_notes,
            "stockDeducted": self.stock_deducted,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


@dataclass(frozen=True)
class PaginationDTO:
    total: int
    page: int
    pages: int
    limit: int

    def to_json(self) -> dict:
        return {
            "total": self.total,
            "page": self.page,
            "pages": self.pages,
            "limit": self.limit,
        }


@dataclass(frozen=True)
class InquiryPageDTO:
    items: list[InquiryDTO]
    pagination: PaginationDTO


@dataclass(frozen=True)
class VariantOptionDTO:
    color: str
    color_code: str
    quantity: int
    price: str | None  # formatted, e.g. "₹1,499"; None means base price


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    description: str
    price: str
    base_color: str
    base_quantity: int
    options: list[VariantOptionDTO]
    updated_at: str

    @staticmethod
    def from_domain(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            description=product.description,
            price=str(product.price),
            base_color=product.base_color,
            base_quantity=product.base_quantity,
            options=[
                VariantOptionDTO(
                    color=option.color,
                    color_code=option.color_code,
                    quantity=option.quantity,
                    price=str(option.price) if option.price is not None else None,
                )
                for option in product.options
            ],
            updated_at=product.updated_at.isoformat(),
        )

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "baseColor": self.base_color,
            "baseQuantity": self.base_quantity,
            "options": [
                {
                    "color": option.color,
                    "colorCode": option.color_code,
                    "quantity": option.quantity,
                    "price": option.price,
                }
                for option in self.options
            ],
            "updatedAt": self.updated_at,
        }
