"""
Sales ledger service.

Append-only record of sales. Each sale snapshots the item's current
price as its unit cost and takes the sold quantity out of the stock of
the sale's month.
"""

from datetime import date

from shopledger.config import get_logger
from shopledger.core.entities import LedgerDocument, QuantitySource, Sale
from shopledger.core.exceptions import ValidationError
from shopledger.core.periods import coerce_date, month_key, parse_month
from shopledger.core.services.item_ledger import (
    ItemLedger,
    resolve_current_price,
    resolve_stock,
)
from shopledger.core.services.validation import (
    require_amount,
    require_positive_int,
    require_text,
)

logger = get_logger(__name__)


class SalesLedger:
    """Records sales against the items of one ledger document."""

    def __init__(self, document: LedgerDocument, items: ItemLedger | None = None) -> None:
        self._document = document
        self._items = items or ItemLedger(document)

    def record_sale(
        self,
        sale_date: date | str,
        buyer: str,
        address: str,
        contact: str,
        item_name: str,
        price: float,
        qty: int,
        manual_profit_per_unit: float | None = None,
    ) -> Sale:
        """
        Record a sale and decrement stock for the sale's month.

        Profit is ``manual_profit_per_unit * qty`` when an override is
        given, otherwise ``(price - cost) * qty`` where cost is the
        item's current price at this moment.
        """
        if sale_date is None:
            raise ValidationError("date", "is required")
        on = coerce_date(sale_date)
        buyer = require_text("buyer", buyer)
        address = require_text("address", address)
        contact = require_text("contact", contact)
        item_name = require_text("item", item_name)
        price = require_amount("price", price)
        qty = require_positive_int("qty", qty)
        if manual_profit_per_unit is not None:
            manual_profit_per_unit = require_amount(
                "manual_profit_per_unit", manual_profit_per_unit, allow_negative=True
            )

        item = self._items.require(item_name)
        cost_per_unit = resolve_current_price(item)

        total = price * qty
        if manual_profit_per_unit is not None:
            profit = manual_profit_per_unit * qty
        else:
            profit = (price - cost_per_unit) * qty

        sale = Sale(
            sale_date=on,
            buyer=buyer,
            address=address,
            contact=contact,
            item=item.name,
            price=price,
            qty=qty,
            total=total,
            profit=profit,
            profit_is_manual=manual_profit_per_unit is not None,
        )
        self._document.sales.append(sale)

        month = month_key(on)
        remaining = self._items.set_quantity(
            item.name,
            month,
            resolve_stock(item, month) - qty,
            on,
            QuantitySource.SALE.value,
        )

        logger.info(
            "sale_recorded",
            item=item.name,
            qty=qty,
            total=total,
            profit=profit,
            manual=sale.profit_is_manual,
            remaining=remaining,
        )
        return sale

    def sales_for_month(self, month: str | None = None) -> list[Sale]:
        """Sales dated in *month*, oldest first (stable on equal dates)."""
        month = parse_month(month)
        matching = [s for s in self._document.sales if month_key(s.sale_date) == month]
        return sorted(matching, key=lambda s: s.sale_date)
