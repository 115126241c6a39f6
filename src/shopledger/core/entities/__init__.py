"""Core domain entities."""

from shopledger.core.entities.document import LedgerDocument
from shopledger.core.entities.item import (
    Item,
    PriceEntry,
    QuantityChange,
    QuantitySource,
)
from shopledger.core.entities.report import (
    ItemListing,
    ItemValuationRow,
    MonthlyReport,
    PriceHistoryRow,
    SalesReport,
    YearlyReport,
    YearlyRow,
    YearlyTotals,
)
from shopledger.core.entities.sale import Sale
from shopledger.core.entities.snapshot import MonthlySnapshot

__all__ = [
    # Ledger
    "LedgerDocument",
    "Item",
    "PriceEntry",
    "QuantityChange",
    "QuantitySource",
    "Sale",
    "MonthlySnapshot",
    # Reports
    "ItemListing",
    "ItemValuationRow",
    "MonthlyReport",
    "PriceHistoryRow",
    "SalesReport",
    "YearlyReport",
    "YearlyRow",
    "YearlyTotals",
]
