"""Domain service: Variant Resolver.

Decides which stock pool an inquiry draws from. The primary pool answers
to the empty label and to ``base_color``; every other label must name an
option color. Duplicated option colors are a data problem; the first
match wins.
"""

from __future__ import annotations

from storefront.domain.exceptions import InvalidVariantError
from storefront.domain.model.product import Product
from storefront.domain.model.stock_pool import StockPool


def resolve_stock_pool(product: Product, variant: str) -> StockPool:
    """Return the pool for ``variant`` or raise InvalidVariantError."""
    if not variant or variant == product.base_color:
        return StockPool(product=product, variant=variant)

    index = product.find_option(variant)
    if index is None:
        raise InvalidVariantError(variant, product.name)
    return StockPool(product=product, variant=variant, option_index=index)
