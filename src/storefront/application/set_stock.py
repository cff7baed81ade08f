"""Application service: Set Stock use case.

Overwrites the quantity of one stock pool (the primary pool, or a
variant option) after an intake or a stock count. Pools are found with
the same resolver the fulfillment path uses.
"""

from __future__ import annotations

import logging
from typing import Any

from storefront.application.dto import ProductDTO
from storefront.application.schemas import SetStockRequest, validate_payload
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.unit_of_work import UnitOfWorkFactory
from storefront.domain.service.variant_resolver import resolve_stock_pool

logger = logging.getLogger(__name__)


class SetStockHandler:

    def __init__(self, uow_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = uow_factory

    async def handle(self, product_id: str, payload: dict[str, Any]) -> ProductDTO:
        request = validate_payload(SetStockRequest, payload)

        async with self._uow_factory() as uow:
            product = await uow.products.get_by_id(product_id)
            if product is None:
                raise EntityNotFoundError(f"Product '{product_id}' not found")

            pool = resolve_stock_pool(product, request.variant)
            pool.set(request.quantity)
            await uow.products.save(product)
            await uow.commit()

        logger.info(f"Stock for '{product.name}' ({pool.label}) set to {request.quantity}")
        return ProductDTO.from_domain(product)
