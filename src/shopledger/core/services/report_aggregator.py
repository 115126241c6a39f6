"""
Report aggregation service.

Builds monthly and yearly summaries from the item and sales ledgers.
Monthly reports refresh the snapshot cache; yearly reports prefer
cached snapshots and fall back to live computation for months that
were never snapshotted, without writing anything.
"""

from collections.abc import Callable
from datetime import UTC, datetime

from shopledger.config import get_logger
from shopledger.core.entities import (
    ItemValuationRow,
    LedgerDocument,
    MonthlyReport,
    MonthlySnapshot,
    Sale,
    SalesReport,
    YearlyReport,
    YearlyRow,
    YearlyTotals,
)
from shopledger.core.periods import months_of_year, parse_month
from shopledger.core.services.item_ledger import (
    ItemLedger,
    resolve_current_price,
    resolve_stock,
)
from shopledger.core.services.sales_ledger import SalesLedger
from shopledger.core.services.snapshot_cache import SnapshotCache

logger = get_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ReportAggregator:
    """Derives reports from one ledger document."""

    def __init__(
        self,
        document: LedgerDocument,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._document = document
        self._sales = SalesLedger(document, ItemLedger(document))
        self._cache = SnapshotCache(document)
        self._clock = clock

    # ------------------------------------------------------------------
    # Building blocks
    # ------------------------------------------------------------------

    def stock_valuation(self, month: str) -> tuple[list[ItemValuationRow], float]:
        """Items in stock for *month*, valued at today's current price."""
        rows: list[ItemValuationRow] = []
        for key, item in self._document.items.items():
            qty = resolve_stock(item, month)
            if qty <= 0:
                continue
            price = resolve_current_price(item)
            rows.append(
                ItemValuationRow(key=key, name=item.name, price=price, qty=qty, total=qty * price)
            )
        rows.sort(key=lambda row: row.name.casefold())
        return rows, sum(row.total for row in rows)

    @staticmethod
    def _sales_totals(sales: list[Sale]) -> tuple[float, float]:
        return sum(s.total for s in sales), sum(s.profit for s in sales)

    # ------------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------------

    def monthly_report(self, month: str) -> MonthlyReport:
        """Stock valuation plus sales of *month*; overwrites its snapshot."""
        month = parse_month(month)
        rows, items_total = self.stock_valuation(month)
        sales = self._sales.sales_for_month(month)
        sales_total, sales_profit = self._sales_totals(sales)
        generated_at = self._clock()

        self._cache.put(
            month,
            MonthlySnapshot(
                generated_at=generated_at,
                items_total=items_total,
                sales_total=sales_total,
                sales_profit=sales_profit,
                sales_count=len(sales),
            ),
        )
        logger.info(
            "monthly_snapshot_written",
            month=month,
            items_total=items_total,
            sales_total=sales_total,
            sales_count=len(sales),
        )

        return MonthlyReport(
            month=month,
            items=rows,
            items_total=items_total,
            sales=sales,
            sales_total=sales_total,
            sales_profit=sales_profit,
            sales_count=len(sales),
            generated_at=generated_at,
        )

    def sales_report(self, month: str) -> SalesReport:
        """Sales of *month* with totals. Read-only."""
        month = parse_month(month)
        sales = self._sales.sales_for_month(month)
        sales_total, sales_profit = self._sales_totals(sales)
        return SalesReport(
            month=month,
            sales=sales,
            sales_total=sales_total,
            sales_profit=sales_profit,
            sales_count=len(sales),
        )

    def yearly_report(self, year: int) -> YearlyReport:
        """Twelve monthly rows, from snapshots where available. Read-only."""
        rows = [self._yearly_row(month) for month in months_of_year(year)]
        totals = YearlyTotals(
            items=sum(r.items_total for r in rows),
            sales=sum(r.sales_total for r in rows),
            profit=sum(r.sales_profit for r in rows),
            combined=sum(r.combined for r in rows),
        )
        logger.debug(
            "yearly_report_built",
            year=year,
            snapshotted=sum(1 for r in rows if r.from_snapshot),
        )
        return YearlyReport(year=year, months=rows, totals=totals)

    def _yearly_row(self, month: str) -> YearlyRow:
        snapshot = self._cache.get(month)
        if snapshot is not None:
            return YearlyRow(
                month=month,
                items_total=snapshot.items_total,
                sales_total=snapshot.sales_total,
                sales_profit=snapshot.sales_profit,
                combined=snapshot.items_total + snapshot.sales_total,
                from_snapshot=True,
            )

        _, items_total = self.stock_valuation(month)
        sales_total, sales_profit = self._sales_totals(self._sales.sales_for_month(month))
        return YearlyRow(
            month=month,
            items_total=items_total,
            sales_total=sales_total,
            sales_profit=sales_profit,
            combined=items_total + sales_total,
        )
