"""Tests for LedgerService read-modify-write orchestration."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from shopledger.application.ledger_service import LedgerService
from shopledger.core.entities import LedgerDocument
from shopledger.core.exceptions import ItemNotFoundError, StoreWriteError, ValidationError
from shopledger.infrastructure.storage import InMemoryLedgerStore


def _sell(service: LedgerService, **overrides):
    data = {
        "sale_date": "2024-01-10",
        "buyer": "Ali",
        "address": "12 Market St",
        "contact": "0550",
        "item_name": "Rice",
        "price": 12.0,
        "qty": 5,
    }
    data.update(overrides)
    return service.record_sale(**data)


@pytest.fixture
def stocked(service: LedgerService) -> LedgerService:
    service.add_item("Rice", 10.0, 50, "2024-01-05")
    return service


class TestMutations:
    """Mutations persist through the store."""

    def test_add_item_persists(self, stocked: LedgerService, memory_store: InMemoryLedgerStore):
        assert '"priceHistory"' in memory_store.raw
        assert memory_store.load().items["rice"].quantities == {"2024-01": 50}

    def test_record_sale_persists(self, stocked: LedgerService, memory_store):
        sale = _sell(stocked)
        assert sale.profit == 10.0
        doc = memory_store.load()
        assert len(doc.sales) == 1
        assert doc.items["rice"].quantities["2024-01"] == 45

    def test_quantity_operations(self, stocked: LedgerService):
        assert stocked.set_quantity("Rice", "2024-01", 10) == 10
        assert stocked.adjust_quantity("Rice", "2024-01", -1) == 9
        assert stocked.get_item("rice").quantities["2024-01"] == 9

    def test_prices(self, stocked: LedgerService):
        stocked.update_price("Rice", 10.0, "2024-01-06")
        assert len(stocked.get_item("Rice").price_history) == 2
        assert stocked.set_inline_price("Rice", 10.0) is False
        assert stocked.set_inline_price("Rice", 13.0, date(2024, 1, 7)) is True
        assert stocked.suggest_sale_price("Rice") == 13.0

    def test_delete_items(self, stocked: LedgerService):
        assert stocked.delete_items(["Rice", "ghost"]) == ["rice"]
        assert stocked.list_items().items == []


class TestAllOrNothing:
    """A failing operation never reaches the store."""

    def test_validation_failure_leaves_store(self, stocked: LedgerService, memory_store):
        before = memory_store.raw
        with pytest.raises(ValidationError):
            _sell(stocked, buyer="")
        assert memory_store.raw == before

    def test_not_found_leaves_store(self, stocked: LedgerService, memory_store):
        before = memory_store.raw
        with pytest.raises(ItemNotFoundError):
            stocked.update_price("Flour", 3.0)
        assert memory_store.raw == before

    def test_save_not_called_on_failure(self):
        store = MagicMock()
        store.load.return_value = LedgerDocument.empty()
        service = LedgerService(store=store)
        with pytest.raises(ValidationError):
            service.add_item("", 1.0, 1)
        store.save.assert_not_called()

    def test_write_failure_propagates(self):
        store = MagicMock()
        store.load.return_value = LedgerDocument.empty()
        store.save.side_effect = StoreWriteError("memory", "disk full")
        service = LedgerService(store=store)
        with pytest.raises(StoreWriteError):
            service.add_item("Rice", 1.0, 1)

    def test_empty_store_is_new_ledger(self):
        service = LedgerService(store=InMemoryLedgerStore("{not json"))
        assert service.list_items().items == []
        assert service.yearly_report(2024).totals.combined == 0.0


class TestReports:
    def test_monthly_report_saves_snapshot(self, stocked: LedgerService, memory_store, fixed_clock):
        report = stocked.monthly_report("2024-01")
        assert report.items_total == 500.0
        assert report.generated_at == fixed_clock()
        assert "2024-01" in memory_store.load().monthly_snapshots

    def test_sales_and_yearly_are_read_only(self, stocked: LedgerService, memory_store):
        _sell(stocked)
        before = memory_store.raw
        assert stocked.sales_report("2024-01").sales_total == 60.0
        assert stocked.yearly_report(2024).totals.sales == 60.0
        assert stocked.sales_for_month("2024-01")[0].buyer == "Ali"
        assert memory_store.raw == before

    def test_price_history(self, stocked: LedgerService):
        stocked.update_price("Rice", 11.0, "2024-02-01")
        assert [row.price for row in stocked.price_history()] == [10.0, 11.0]


class TestExports:
    def test_receipt_text(self, stocked: LedgerService):
        text = stocked.render_receipt_text("2024-01")
        assert text.splitlines()[0] == "Corner Shop - Receipt for 2024-01"
        assert "Rice\t10.00\t50\t500.00" in text

    def test_export_files(self, stocked: LedgerService, tmp_path):
        _sell(stocked)
        receipt = stocked.export_receipt("2024-01", tmp_path)
        sales = stocked.export_sales("2024-01", tmp_path)
        assert receipt.name == "receipt_2024-01.txt"
        assert sales.name == "sales_2024-01.txt"
        assert "Sales Total" in sales.read_text(encoding="utf-8")

    def test_export_default_directory(self, stocked: LedgerService, tmp_path):
        path = stocked.export_receipt("2024-01")
        assert path.parent == tmp_path / "exports"

    def test_pdfs(self, stocked: LedgerService):
        _sell(stocked)
        assert stocked.render_monthly_pdf("2024-01").startswith(b"%PDF")
        assert stocked.render_sales_pdf("2024-01").startswith(b"%PDF")
        assert stocked.render_yearly_pdf(2024).startswith(b"%PDF")
