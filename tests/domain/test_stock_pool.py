"""Unit tests for the StockPool ledger operation."""

import pytest

from storefront.domain.exceptions import InsufficientStockError, ValidationError
from storefront.domain.model.product import Product, VariantOption
from storefront.domain.model.stock_pool import StockPool
from storefront.domain.model.value_objects import Money


def _product() -> Product:
    return Product(
        id="p1",
        name="Silk Saree",
        price=Money.of("1499"),
        base_color="Red",
        base_quantity=5,
        options=[VariantOption(color="Blue", quantity=3)],
    )


class TestDecrement:

    def test_primary_pool_writes_back_to_product(self):
        product = _product()
        remaining = StockPool(product, "Red").decrement(2)
        assert remaining == 3
        assert product.base_quantity == 3
        assert product.options[0].quantity == 3

    def test_option_pool_writes_back_to_option(self):
        product = _product()
        StockPool(product, "Blue", option_index=0).decrement(2)
        assert product.options[0].quantity == 1
        assert product.base_quantity == 5

    def test_decrement_to_exactly_zero(self):
        product = _product()
        assert StockPool(product, "Blue", option_index=0).decrement(3) == 0
        assert product.options[0].quantity == 0

    def test_insufficient_stock_leaves_pool_untouched(self):
        product = _product()
        pool = StockPool(product, "Blue", option_index=0)
        with pytest.raises(InsufficientStockError, match="variant 'Blue'") as exc_info:
            pool.decrement(10)
        assert exc_info.value.requested == 10
        assert exc_info.value.available == 3
        assert product.options[0].quantity == 3

    def test_empty_label_reports_base_color(self):
        with pytest.raises(InsufficientStockError, match="variant 'Red'"):
            StockPool(_product(), "").decrement(6)

    def test_zero_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            StockPool(_product(), "").decrement(0)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            StockPool(_product(), "").decrement(-2)

    def test_decrement_touches_updated_at(self):
        product = _product()
        before = product.updated_at
        StockPool(product, "").decrement(1)
        assert product.updated_at >= before


class TestSet:

    def test_set_overwrites_quantity(self):
        product = _product()
        StockPool(product, "Blue", option_index=0).set(40)
        assert product.options[0].quantity == 40

    def test_set_negative_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            StockPool(_product(), "").set(-1)
