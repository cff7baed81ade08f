"""Application service: Add Product use case."""

from __future__ import annotations

from typing import Any
from uuid import uuid4

from storefront.application.dto import ProductDTO
from storefront.application.schemas import CreateProductRequest, validate_payload
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.product import Product, VariantOption
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory


class AddProductHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def handle(self, payload: dict[str, Any]) -> ProductDTO:
        """Add a new product, with its variant options, to the catalog."""
        request = validate_payload(CreateProductRequest, payload)

        async with self._uow_factory() as uow:
            existing = await uow.products.get_by_name(request.name)
            if existing is not None:
                raise ValidationError(f"Product '{request.name}' already exists")

            product = Product.create(
                product_id=uuid4().hex,
                name=request.name,
                price=Money(request.price),
                base_quantity=request.base_quantity,
                base_color=request.base_color,
                description=request.description,
                options=[
                    VariantOption(
                        color=option.color,
                        quantity=option.quantity,
                        price=Money(option.price) if option.price is not None else None,
                        color_code=option.color_code,
                    )
                    for option in request.options
                ],
            )
            await uow.products.save(product)
            await uow.commit()

        return ProductDTO.from_domain(product)
