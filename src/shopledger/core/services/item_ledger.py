"""
Item ledger service.

Owns every item in a LedgerDocument: price history, per-month stock
levels and the stock audit trail. Current price and current stock are
always derived on read, never cached.
"""

from collections.abc import Iterable
from datetime import date

from shopledger.config import get_logger
from shopledger.core.entities import (
    Item,
    ItemListing,
    ItemValuationRow,
    LedgerDocument,
    PriceEntry,
    PriceHistoryRow,
    QuantityChange,
    QuantitySource,
)
from shopledger.core.exceptions import ItemNotFoundError, ValidationError
from shopledger.core.periods import coerce_date, month_key, parse_month
from shopledger.core.services.validation import (
    require_amount,
    require_int,
    require_positive_int,
    require_text,
)

logger = get_logger(__name__)


def normalize_name(name: str) -> str:
    """Lookup key of an item: trimmed and case-folded."""
    return name.strip().casefold()


def resolve_current_price(item: Item) -> float:
    """Price of the latest-dated history entry; last inserted wins ties."""
    if not item.price_history:
        return 0.0
    # sorted() is stable, so equal dates keep insertion order.
    ordered = sorted(item.price_history, key=lambda entry: entry.effective_date)
    return ordered[-1].price


def resolve_stock(item: Item, month: str) -> int:
    return item.quantities.get(month, 0)


class ItemLedger:
    """
    Mutations and queries over the items of one ledger document.

    All mutating methods validate their input first and raise
    ValidationError / ItemNotFoundError without touching the document.
    """

    def __init__(self, document: LedgerDocument) -> None:
        self._document = document

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, name: str) -> Item | None:
        return self._document.items.get(normalize_name(name))

    def require(self, name: str) -> Item:
        """Item by (display or normalized) name, or ItemNotFoundError."""
        item = self.get(require_text("name", name))
        if item is None:
            raise ItemNotFoundError(name.strip())
        return item

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def upsert_item(
        self,
        name: str,
        price: float,
        qty: int,
        on: date | str | None = None,
        source: str = QuantitySource.ADD_FORM.value,
    ) -> Item:
        """
        Create an item or add stock to an existing one.

        A new price point is recorded only when *price* differs from the
        item's current price. *qty* is added to the stock of the month
        of *on*.
        """
        display_name = require_text("name", name)
        price = require_amount("price", price)
        qty = require_positive_int("qty", qty)
        entry_date = coerce_date(on)
        month = month_key(entry_date)
        key = normalize_name(display_name)

        item = self._document.items.get(key)
        if item is None:
            item = Item(
                name=display_name,
                price_history=[PriceEntry(price=price, effective_date=entry_date)],
                quantities={month: qty},
                qty_history=[
                    QuantityChange(
                        month=month, changed_on=entry_date, delta=qty, source=source
                    )
                ],
            )
            self._document.items[key] = item
            logger.info("item_created", key=key, price=price, qty=qty, month=month)
            return item

        if resolve_current_price(item) != price:
            item.price_history.append(PriceEntry(price=price, effective_date=entry_date))
        item.quantities[month] = resolve_stock(item, month) + qty
        self._log_change(item, month, entry_date, qty, source)

        logger.info(
            "item_restocked",
            key=key,
            month=month,
            qty=qty,
            stock=item.quantities[month],
        )
        return item

    def update_price(
        self, name: str, price: float, on: date | str | None = None
    ) -> Item:
        """Record a new price point, even if equal to the current price."""
        price = require_amount("price", price)
        entry_date = coerce_date(on)
        item = self.require(name)

        item.price_history.append(PriceEntry(price=price, effective_date=entry_date))
        logger.info("price_updated", item=item.name, price=price, date=str(entry_date))
        return item

    def set_inline_price(
        self, name: str, price: float, on: date | str | None = None
    ) -> bool:
        """Record *price* only if it differs from the current price.

        Returns True when a new price point was appended.
        """
        price = require_amount("price", price)
        entry_date = coerce_date(on)
        item = self.require(name)

        if resolve_current_price(item) == price:
            return False
        item.price_history.append(PriceEntry(price=price, effective_date=entry_date))
        logger.info("price_edited", item=item.name, price=price)
        return True

    def set_quantity(
        self,
        name: str,
        month: str | None,
        new_qty: int,
        on: date | str | None = None,
        source: str = QuantitySource.INLINE_EDIT.value,
    ) -> int:
        """Overwrite the stock of *month*, clamped at zero. Returns the new stock."""
        month = parse_month(month)
        new_qty = max(0, require_int("qty", new_qty))
        entry_date = coerce_date(on)
        item = self.require(name)

        delta = new_qty - resolve_stock(item, month)
        item.quantities[month] = new_qty
        self._log_change(item, month, entry_date, delta, source)
        return new_qty

    def adjust_quantity(
        self,
        name: str,
        month: str | None,
        delta_one: int,
        on: date | str | None = None,
        source: str | None = None,
    ) -> int:
        """Step the stock of *month* by +1 or -1, never below zero."""
        if isinstance(delta_one, bool) or not isinstance(delta_one, int) or delta_one not in (1, -1):
            raise ValidationError("delta", "must be +1 or -1", delta_one)
        month = parse_month(month)
        item = self.require(name)

        current = max(0, resolve_stock(item, month))
        if source is None:
            source = (QuantitySource.PLUS if delta_one > 0 else QuantitySource.MINUS).value
        return self.set_quantity(item.name, month, current + delta_one, on, source)

    def delete_items(self, keys: Iterable[str]) -> list[str]:
        """Remove items with all their history. Unknown keys are ignored.

        Returns the keys actually removed.
        """
        removed: list[str] = []
        for key in {normalize_name(k) for k in keys if isinstance(k, str)}:
            if self._document.items.pop(key, None) is not None:
                removed.append(key)
        if removed:
            logger.info("items_deleted", keys=sorted(removed))
        return sorted(removed)

    @staticmethod
    def _log_change(
        item: Item, month: str, on: date, delta: int, source: str
    ) -> None:
        if delta == 0:
            return
        item.qty_history.append(
            QuantityChange(month=month, changed_on=on, delta=delta, source=source)
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_items(self, search: str | None = None, month: str | None = None) -> ItemListing:
        """Items sorted by name, valued at current price for *month*."""
        month = parse_month(month)
        needle = (search or "").strip().casefold()

        rows: list[ItemValuationRow] = []
        for key, item in self._document.items.items():
            if needle and needle not in item.name.casefold():
                continue
            price = resolve_current_price(item)
            qty = resolve_stock(item, month)
            rows.append(
                ItemValuationRow(key=key, name=item.name, price=price, qty=qty, total=price * qty)
            )
        rows.sort(key=lambda row: row.name.casefold())

        return ItemListing(
            month=month,
            items=rows,
            grand_total=sum(row.total for row in rows),
        )

    def price_history(self) -> list[PriceHistoryRow]:
        """Every price point of every item, by item name then date."""
        rows = [
            PriceHistoryRow(name=item.name, price=entry.price, effective_date=entry.effective_date)
            for item in self._document.items.values()
            for entry in item.price_history
        ]
        rows.sort(key=lambda row: (row.name.casefold(), row.effective_date))
        return rows
