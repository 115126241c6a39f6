"""Core ledger services. Pure logic over a LedgerDocument, no I/O."""

from shopledger.core.services.item_ledger import (
    ItemLedger,
    normalize_name,
    resolve_current_price,
    resolve_stock,
)
from shopledger.core.services.report_aggregator import ReportAggregator
from shopledger.core.services.sales_ledger import SalesLedger
from shopledger.core.services.snapshot_cache import SnapshotCache

__all__ = [
    "ItemLedger",
    "SalesLedger",
    "ReportAggregator",
    "SnapshotCache",
    "normalize_name",
    "resolve_current_price",
    "resolve_stock",
]
