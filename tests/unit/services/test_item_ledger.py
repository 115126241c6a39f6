"""Tests for ItemLedger."""

from datetime import date

import pytest

from shopledger.core.entities import Item, PriceEntry
from shopledger.core.exceptions import ItemNotFoundError, ValidationError
from shopledger.core.services import ItemLedger, normalize_name, resolve_current_price, resolve_stock


class TestResolvers:
    def test_current_price_empty_history(self):
        assert resolve_current_price(Item(name="Salt")) == 0.0

    def test_current_price_uses_latest_date(self):
        item = Item(
            name="Rice",
            price_history=[
                PriceEntry(price=12.0, effective_date=date(2024, 3, 1)),
                PriceEntry(price=10.0, effective_date=date(2024, 1, 1)),
                PriceEntry(price=11.0, effective_date=date(2024, 2, 1)),
            ],
        )
        assert resolve_current_price(item) == 12.0

    def test_current_price_tie_last_inserted_wins(self):
        item = Item(
            name="Rice",
            price_history=[
                PriceEntry(price=10.0, effective_date=date(2024, 1, 1)),
                PriceEntry(price=9.5, effective_date=date(2024, 1, 1)),
            ],
        )
        assert resolve_current_price(item) == 9.5

    def test_resolve_stock_absent_month(self):
        item = Item(name="Rice", quantities={"2024-01": 5})
        assert resolve_stock(item, "2024-01") == 5
        assert resolve_stock(item, "2024-02") == 0

    def test_normalize_name(self):
        assert normalize_name("  RiCe ") == "rice"


class TestUpsertItem:
    """Tests for creating and restocking items."""

    def test_creates_item(self, items: ItemLedger, document):
        item = items.upsert_item(" Rice ", 10.0, 50, date(2024, 1, 5))
        assert document.items["rice"] is item
        assert item.name == "Rice"
        assert len(item.price_history) == 1
        assert item.quantities == {"2024-01": 50}
        assert item.qty_history[0].delta == 50
        assert item.qty_history[0].source == "addForm"

    def test_same_price_does_not_add_history(self, items: ItemLedger):
        items.upsert_item("Rice", 10.0, 50, date(2024, 1, 5))
        item = items.upsert_item("rice", 10.0, 5, date(2024, 1, 6))
        assert len(item.price_history) == 1
        assert item.quantities["2024-01"] == 55
        assert [c.delta for c in item.qty_history] == [50, 5]

    def test_different_price_adds_one_entry(self, items: ItemLedger):
        items.upsert_item("Rice", 10.0, 50, date(2024, 1, 5))
        item = items.upsert_item("RICE", 11.0, 5, date(2024, 1, 6))
        assert len(item.price_history) == 2
        assert resolve_current_price(item) == 11.0

    def test_restock_other_month(self, items: ItemLedger):
        items.upsert_item("Rice", 10.0, 50, date(2024, 1, 5))
        item = items.upsert_item("Rice", 10.0, 20, date(2024, 2, 1))
        assert item.quantities == {"2024-01": 50, "2024-02": 20}

    @pytest.mark.parametrize(
        "name,price,qty",
        [
            ("", 10.0, 1),
            ("   ", 10.0, 1),
            ("Rice", float("nan"), 1),
            ("Rice", float("inf"), 1),
            ("Rice", -1.0, 1),
            ("Rice", "10", 1),
            ("Rice", 10.0, 0),
            ("Rice", 10.0, -3),
            ("Rice", 10.0, 1.5),
            ("Rice", 10.0, True),
        ],
    )
    def test_rejects_invalid_input(self, items: ItemLedger, document, name, price, qty):
        with pytest.raises(ValidationError):
            items.upsert_item(name, price, qty, date(2024, 1, 5))
        assert document.items == {}


class TestUpdatePrice:
    def test_always_appends(self, items: ItemLedger, rice_document):
        items.update_price("Rice", 10.0, date(2024, 2, 1))
        item = items.update_price("rice", 10.0, date(2024, 2, 1))
        assert len(item.price_history) == 3

    def test_unknown_item(self, items: ItemLedger):
        with pytest.raises(ItemNotFoundError):
            items.update_price("Flour", 5.0)

    def test_invalid_price(self, items: ItemLedger, rice_document):
        with pytest.raises(ValidationError):
            items.update_price("Rice", -5.0)
        assert len(rice_document.items["rice"].price_history) == 1


class TestSetInlinePrice:
    def test_unchanged_price_is_noop(self, items: ItemLedger, rice_document):
        assert items.set_inline_price("Rice", 10.0) is False
        assert len(rice_document.items["rice"].price_history) == 1

    def test_changed_price_appends(self, items: ItemLedger, rice_document):
        assert items.set_inline_price("Rice", 10.5, date(2024, 1, 20)) is True
        assert resolve_current_price(rice_document.items["rice"]) == 10.5


class TestQuantities:
    """Tests for set_quantity and adjust_quantity."""

    def test_set_quantity_records_delta(self, items: ItemLedger, rice_document):
        assert items.set_quantity("Rice", "2024-01", 40, date(2024, 1, 8)) == 40
        item = rice_document.items["rice"]
        assert item.quantities["2024-01"] == 40
        assert item.qty_history[-1].delta == -10
        assert item.qty_history[-1].source == "inlineEdit"

    def test_set_quantity_clamps_negative(self, items: ItemLedger, rice_document):
        assert items.set_quantity("Rice", "2024-01", -7) == 0
        assert rice_document.items["rice"].qty_history[-1].delta == -50

    def test_zero_delta_not_audited(self, items: ItemLedger, rice_document):
        items.set_quantity("Rice", "2024-01", 50)
        assert len(rice_document.items["rice"].qty_history) == 1

    def test_set_quantity_unknown_item(self, items: ItemLedger):
        with pytest.raises(ItemNotFoundError):
            items.set_quantity("Flour", "2024-01", 3)

    def test_set_quantity_bad_month(self, items: ItemLedger, rice_document):
        with pytest.raises(ValidationError):
            items.set_quantity("Rice", "January", 3)

    def test_adjust_up_and_down(self, items: ItemLedger, rice_document):
        assert items.adjust_quantity("Rice", "2024-01", 1) == 51
        assert items.adjust_quantity("Rice", "2024-01", -1) == 50
        sources = [c.source for c in rice_document.items["rice"].qty_history]
        assert sources == ["addForm", "plus", "minus"]

    def test_adjust_floors_at_zero(self, items: ItemLedger, rice_document):
        items.set_quantity("Rice", "2024-03", 0)
        assert items.adjust_quantity("Rice", "2024-03", -1) == 0
        assert items.adjust_quantity("Rice", "2024-03", -1) == 0

    def test_adjust_clamps_stored_negative(self, items: ItemLedger, rice_document):
        rice_document.items["rice"].quantities["2024-04"] = -3
        assert items.adjust_quantity("Rice", "2024-04", 1) == 1

    @pytest.mark.parametrize("delta", [0, 2, -5, True, 1.0])
    def test_adjust_rejects_other_deltas(self, items: ItemLedger, rice_document, delta):
        with pytest.raises(ValidationError):
            items.adjust_quantity("Rice", "2024-01", delta)

    def test_stock_never_negative(self, items: ItemLedger, rice_document):
        for value in (5, -2, 0, 3):
            items.set_quantity("Rice", "2024-01", value)
            for _ in range(5):
                items.adjust_quantity("Rice", "2024-01", -1)
            assert rice_document.items["rice"].quantities["2024-01"] >= 0


class TestDeleteItems:
    def test_removes_items(self, items: ItemLedger, rice_document):
        items.upsert_item("Flour", 4.0, 10, date(2024, 1, 5))
        removed = items.delete_items(["RICE", "flour"])
        assert removed == ["flour", "rice"]
        assert rice_document.items == {}

    def test_unknown_keys_ignored(self, items: ItemLedger, rice_document):
        assert items.delete_items(["sugar"]) == []
        assert "rice" in rice_document.items


class TestQueries:
    def test_list_items_filters_and_sorts(self, items: ItemLedger):
        items.upsert_item("white rice", 10.0, 2, date(2024, 1, 5))
        items.upsert_item("Brown Rice", 12.0, 3, date(2024, 1, 5))
        items.upsert_item("Flour", 4.0, 10, date(2024, 1, 5))

        listing = items.list_items(search="RICE", month="2024-01")
        assert [row.name for row in listing.items] == ["Brown Rice", "white rice"]
        assert listing.grand_total == 56.0

    def test_list_items_includes_zero_stock(self, items: ItemLedger, rice_document):
        listing = items.list_items(month="2024-02")
        assert listing.items[0].qty == 0
        assert listing.grand_total == 0.0

    def test_price_history(self, items: ItemLedger, rice_document):
        items.upsert_item("Flour", 4.0, 10, date(2024, 1, 5))
        items.update_price("Rice", 11.0, date(2024, 2, 1))
        rows = items.price_history()
        assert [(r.name, r.price) for r in rows] == [
            ("Flour", 4.0),
            ("Rice", 10.0),
            ("Rice", 11.0),
        ]

    def test_require_trims_name(self, items: ItemLedger, rice_document):
        assert items.require("  rice ").name == "Rice"
        assert items.get("nothing") is None
