"""Tests for the catalog use cases: AddProduct, ShowProduct, SetStock."""

import pytest

from storefront.application.add_product import AddProductHandler
from storefront.application.set_stock import SetStockHandler
from storefront.application.show_product import ShowProductHandler
from storefront.domain.exceptions import (
    EntityNotFoundError,
    InvalidVariantError,
    ValidationError,
)
from storefront.domain.model.product import Product, VariantOption
from storefront.domain.model.value_objects import Money
from tests.fakes import FakeStore


def _saree() -> Product:
    return Product(
        id="p1",
        name="Silk Saree",
        price=Money.of("1499"),
        base_quantity=5,
        base_color="Red",
        options=[VariantOption(color="Blue", quantity=3, price=Money.of("1999"))],
    )


class TestAddProduct:

    @pytest.mark.asyncio
    async def test_creates_product_with_options(self):
        store = FakeStore()
        dto = await AddProductHandler(store.uow_factory()).handle({
            "name": "Cotton Kurta",
            "price": "799",
            "baseColor": "White",
            "baseQuantity": 10,
            "options": [
                {"color": "Black", "quantity": 4},
                {"color": "Indigo", "quantity": 2, "price": "899.50"},
            ],
        })

        assert dto.name == "Cotton Kurta"
        assert dto.price == "₹799"
        assert [o.color for o in dto.options] == ["Black", "Indigo"]
        assert dto.options[0].price is None
        assert dto.options[1].price == "₹899.50"
        assert store.products[dto.id].base_quantity == 10

    @pytest.mark.asyncio
    async def test_duplicate_name_rejected(self):
        store = FakeStore(products=[_saree()])
        with pytest.raises(ValidationError, match="already exists"):
            await AddProductHandler(store.uow_factory()).handle({
                "name": "silk saree", "price": "100", "baseQuantity": 1,
            })

    @pytest.mark.asyncio
    async def test_duplicate_variant_color_rejected(self):
        store = FakeStore()
        with pytest.raises(ValidationError, match="Duplicate variant color 'Red'"):
            await AddProductHandler(store.uow_factory()).handle({
                "name": "Dupatta",
                "price": "300",
                "baseColor": "Red",
                "baseQuantity": 1,
                "options": [{"color": "Red", "quantity": 2}],
            })
        assert store.products == {}

    @pytest.mark.asyncio
    async def test_negative_quantity_rejected(self):
        store = FakeStore()
        with pytest.raises(ValidationError, match="baseQuantity"):
            await AddProductHandler(store.uow_factory()).handle({
                "name": "Dupatta", "price": "300", "baseQuantity": -1,
            })


class TestShowProduct:

    @pytest.mark.asyncio
    async def test_renders_prices(self):
        store = FakeStore(products=[_saree()])
        data = (await ShowProductHandler(store.uow_factory()).handle("p1")).to_json()

        assert data["price"] == "₹1,499"
        assert data["baseColor"] == "Red"
        assert data["options"] == [
            {"color": "Blue", "colorCode": "", "quantity": 3, "price": "₹1,999"},
        ]

    @pytest.mark.asyncio
    async def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError):
            await ShowProductHandler(FakeStore().uow_factory()).handle("nope")


class TestSetStock:

    @pytest.mark.asyncio
    async def test_sets_option_pool(self):
        store = FakeStore(products=[_saree()])
        dto = await SetStockHandler(store.uow_factory()).handle(
            "p1", {"variant": "Blue", "quantity": 12}
        )
        assert dto.options[0].quantity == 12
        assert store.products["p1"].options[0].quantity == 12
        assert store.products["p1"].base_quantity == 5

    @pytest.mark.asyncio
    @pytest.mark.parametrize("variant", ["", "Red"])
    async def test_sets_primary_pool(self, variant):
        store = FakeStore(products=[_saree()])
        await SetStockHandler(store.uow_factory()).handle(
            "p1", {"variant": variant, "quantity": 0}
        )
        assert store.products["p1"].base_quantity == 0

    @pytest.mark.asyncio
    async def test_unknown_variant(self):
        store = FakeStore(products=[_saree()])
        with pytest.raises(InvalidVariantError):
            await SetStockHandler(store.uow_factory()).handle(
                "p1", {"variant": "Green", "quantity": 1}
            )
        assert store.commits == 0

    @pytest.mark.asyncio
    async def test_negative_quantity(self):
        store = FakeStore(products=[_saree()])
        with pytest.raises(ValidationError):
            await SetStockHandler(store.uow_factory()).handle(
                "p1", {"variant": "Blue", "quantity": -3}
            )

    @pytest.mark.asyncio
    async def test_unknown_product(self):
        with pytest.raises(EntityNotFoundError):
            await SetStockHandler(FakeStore().uow_factory()).handle(
                "nope", {"quantity": 1}
            )
