"""Integration tests for the JSON document store and its unit of work.

These touch the real filesystem under pytest's ``tmp_path``.
"""

import asyncio
import json

import pytest

from storefront.application.update_inquiry import UpdateInquiryHandler
from storefront.domain.exceptions import InsufficientStockError, TransactionAbortedError
from storefront.domain.model.inquiry import BuyOption, Inquiry, InquiryStatus
from storefront.domain.model.product import Product, VariantOption
from storefront.domain.model.value_objects import Money, Quantity
from storefront.infrastructure.persistence.json_document_store import JsonDocumentStore
from storefront.infrastructure.persistence.json_unit_of_work import JsonUnitOfWork


def _product() -> Product:
    return Product(
        id="p1",
        name="Silk Saree",
        price=Money.of("1499.50"),
        base_quantity=5,
        base_color="Red",
        options=[VariantOption(color="Blue", quantity=3, price=Money.of("1999"), color_code="#0000ff")],
    )


def _inquiry(inquiry_id: str = "i1", variant: str = "Blue", qty: int = 2) -> Inquiry:
    return Inquiry(
        id=inquiry_id,
        product_id="p1",
        product_name="Silk Saree",
        variant=variant,
        quantity=Quantity(qty),
        user_name="Asha",
        user_email="asha@example.com",
        whatsapp_number="9812345678",
        location="Surat",
        buy_option=BuyOption.WHOLESALE,
        company_name="Asha Textiles",
    )


async def _seed(store: JsonDocumentStore, *inquiries: Inquiry) -> None:
    async with JsonUnitOfWork(store) as uow:
        await uow.products.save(_product())
        for inquiry in inquiries:
            await uow.inquiries.save(inquiry)
        await uow.commit()


class TestJsonDocumentStore:

    def test_creates_empty_file(self, tmp_path):
        path = tmp_path / "nested" / "store.json"
        JsonDocumentStore(path)
        assert json.loads(path.read_text()) == {"products": [], "inquiries": []}

    @pytest.mark.asyncio
    async def test_round_trips_aggregates(self, tmp_path):
        store = JsonDocumentStore(tmp_path / "store.json")
        await _seed(store, _inquiry())

        async with JsonUnitOfWork(store) as uow:
            product = await uow.products.get_by_id("p1")
            inquiry = await uow.inquiries.get_by_id("i1")

        assert product.price == Money.of("1499.50")
        assert product.options[0].price == Money.of("1999")
        assert product.options[0].color_code == "#0000ff"
        assert inquiry.quantity == Quantity(2)
        assert inquiry.buy_option is BuyOption.WHOLESALE
        assert inquiry.company_name == "Asha Textiles"
        assert inquiry.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_product_lookup_by_name_ignores_case(self, tmp_path):
        store = JsonDocumentStore(tmp_path / "store.json")
        await _seed(store)

        async with JsonUnitOfWork(store) as uow:
            assert (await uow.products.get_by_name("SILK SAREE")).id == "p1"
            assert await uow.products.get_by_name("Kurta") is None

    @pytest.mark.asyncio
    async def test_find_filters(self, tmp_path):
        store = JsonDocumentStore(tmp_path / "store.json")
        done = _inquiry("i2")
        done.status = InquiryStatus.COMPLETED
        await _seed(store, _inquiry("i1"), done)

        async with JsonUnitOfWork(store) as uow:
            completed = await uow.inquiries.find(status=InquiryStatus.COMPLETED)
            for_product = await uow.inquiries.find(product_id="p1")
            for_other = await uow.inquiries.find(product_id="p2")

        assert [i.id for i in completed] == ["i2"]
        assert len(for_product) == 2
        assert for_other == []


class TestJsonUnitOfWork:

    @pytest.mark.asyncio
    async def test_uncommitted_writes_are_discarded(self, tmp_path):
        store = JsonDocumentStore(tmp_path / "store.json")
        await _seed(store)

        async with JsonUnitOfWork(store) as uow:
            await uow.inquiries.save(_inquiry())

        async with JsonUnitOfWork(store) as uow:
            assert await uow.inquiries.get_by_id("i1") is None

    @pytest.mark.asyncio
    async def test_exception_rolls_back(self, tmp_path):
        store = JsonDocumentStore(tmp_path / "store.json")
        await _seed(store)

        with pytest.raises(RuntimeError):
            async with JsonUnitOfWork(store) as uow:
                await uow.inquiries.save(_inquiry())
                raise RuntimeError("boom")

        assert not store.lock.locked()
        assert json.loads(store.file_path.read_text())["inquiries"] == []

    @pytest.mark.asyncio
    async def test_failed_write_aborts_and_leaves_file(self, tmp_path, monkeypatch):
        store = JsonDocumentStore(tmp_path / "store.json")
        await _seed(store, _inquiry())
        before = store.file_path.read_text()

        async def broken_write(collections):
            raise OSError("disk full")

        monkeypatch.setattr(store, "write", broken_write)

        handler = UpdateInquiryHandler(lambda: JsonUnitOfWork(store))
        with pytest.raises(TransactionAbortedError):
            await handler.handle("i1", {"status": "Completed"})

        assert store.file_path.read_text() == before
        assert not store.lock.locked()

    @pytest.mark.asyncio
    async def test_commit_outside_scope_is_rejected(self, tmp_path):
        uow = JsonUnitOfWork(JsonDocumentStore(tmp_path / "store.json"))
        with pytest.raises(TransactionAbortedError, match="not active"):
            await uow.commit()

    @pytest.mark.asyncio
    async def test_completion_persists_stock_and_status_together(self, tmp_path):
        store = JsonDocumentStore(tmp_path / "store.json")
        await _seed(store, _inquiry())

        await UpdateInquiryHandler(lambda: JsonUnitOfWork(store)).handle(
            "i1", {"status": "Completed"}
        )

        raw = json.loads(store.file_path.read_text())
        assert raw["products"][0]["options"][0]["quantity"] == 1
        assert raw["inquiries"][0]["status"] == "Completed"
        assert raw["inquiries"][0]["stock_deducted"] is True

    @pytest.mark.asyncio
    async def test_concurrent_completions_never_oversell(self, tmp_path):
        store = JsonDocumentStore(tmp_path / "store.json")
        await _seed(store, _inquiry("i1"), _inquiry("i2"))
        handler = UpdateInquiryHandler(lambda: JsonUnitOfWork(store))

        results = await asyncio.gather(
            handler.handle("i1", {"status": "Completed"}),
            handler.handle("i2", {"status": "Completed"}),
            return_exceptions=True,
        )

        failures = [r for r in results if isinstance(r, Exception)]
        assert len(failures) == 1
        assert isinstance(failures[0], InsufficientStockError)

        async with JsonUnitOfWork(store) as uow:
            product = await uow.products.get_by_id("p1")
            statuses = sorted(i.status.value for i in await uow.inquiries.find())

        assert product.options[0].quantity == 1
        assert statuses == ["Completed", "Pending"]


class TestSharedDataFile:
    """Two stores on one file stand in for the server and the CLI."""

    @pytest.mark.asyncio
    async def test_completions_from_two_stores_never_oversell(self, tmp_path):
        path = tmp_path / "store.json"
        server, cli = JsonDocumentStore(path), JsonDocumentStore(path)
        await _seed(server, _inquiry("i1"), _inquiry("i2"))

        results = await asyncio.gather(
            UpdateInquiryHandler(lambda: JsonUnitOfWork(server)).handle(
                "i1", {"status": "Completed"}
            ),
            UpdateInquiryHandler(lambda: JsonUnitOfWork(cli)).handle(
                "i2", {"status": "Completed"}
            ),
            return_exceptions=True,
        )

        failures = [r for r in results if isinstance(r, Exception)]
        assert len(failures) == 1
        assert isinstance(failures[0], InsufficientStockError)

        raw = json.loads(path.read_text())
        assert raw["products"][0]["options"][0]["quantity"] == 1
        assert sorted(i["status"] for i in raw["inquiries"]) == ["Completed", "Pending"]

    @pytest.mark.asyncio
    async def test_waiting_too_long_for_the_file_aborts(self, tmp_path):
        path = tmp_path / "store.json"
        holder = JsonDocumentStore(path)
        impatient = JsonDocumentStore(path, lock_timeout=0.1)

        async with JsonUnitOfWork(holder):
            with pytest.raises(TransactionAbortedError, match="Timed out"):
                async with JsonUnitOfWork(impatient):
                    pass

        assert not impatient.lock.locked()
        async with JsonUnitOfWork(impatient) as uow:
            assert await uow.products.get_by_id("p1") is None
