"""
Ledger service: the query and mutation surface for front ends.

Each call loads the full document from the store, works on that fresh
copy and, for mutations, saves it back once the operation succeeded.
A failing operation therefore never reaches the store.
"""

from collections.abc import Callable, Iterable
from datetime import UTC, date, datetime
from pathlib import Path
from typing import TypeVar

from shopledger.config import get_logger
from shopledger.core.entities import (
    Item,
    ItemListing,
    LedgerDocument,
    MonthlyReport,
    PriceHistoryRow,
    Sale,
    SalesReport,
    YearlyReport,
)
from shopledger.core.exceptions import LedgerError
from shopledger.core.interfaces import ILedgerStore
from shopledger.core.services import (
    ItemLedger,
    ReportAggregator,
    SalesLedger,
    resolve_current_price,
)
from shopledger.infrastructure.export import TextReportExporter
from shopledger.infrastructure.pdf import ReportPdfRenderer

logger = get_logger(__name__)

T = TypeVar("T")


def _utcnow() -> datetime:
    return datetime.now(UTC)


class LedgerService:
    """Read-modify-write orchestration over an ILedgerStore."""

    def __init__(
        self,
        store: ILedgerStore,
        exporter: TextReportExporter | None = None,
        pdf_renderer: ReportPdfRenderer | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._store = store
        self._exporter = exporter
        self._pdf_renderer = pdf_renderer
        self._clock = clock

    @property
    def exporter(self) -> TextReportExporter:
        if self._exporter is None:
            self._exporter = TextReportExporter()
        return self._exporter

    @property
    def pdf_renderer(self) -> ReportPdfRenderer:
        if self._pdf_renderer is None:
            self._pdf_renderer = ReportPdfRenderer()
        return self._pdf_renderer

    # ------------------------------------------------------------------
    # Unit of work
    # ------------------------------------------------------------------

    def _read(self) -> LedgerDocument:
        return self._store.load()

    def _mutate(self, operation: str, action: Callable[[LedgerDocument], T]) -> T:
        document = self._store.load()
        try:
            result = action(document)
        except LedgerError as e:
            logger.warning("ledger_operation_rejected", operation=operation, error=e.code)
            raise
        self._store.save(document)
        return result

    # ------------------------------------------------------------------
    # Item mutations
    # ------------------------------------------------------------------

    def add_item(
        self, name: str, price: float, qty: int, on: date | str | None = None
    ) -> Item:
        return self._mutate(
            "add_item", lambda doc: ItemLedger(doc).upsert_item(name, price, qty, on)
        )

    def update_price(self, name: str, price: float, on: date | str | None = None) -> Item:
        return self._mutate(
            "update_price", lambda doc: ItemLedger(doc).update_price(name, price, on)
        )

    def set_inline_price(
        self, name: str, price: float, on: date | str | None = None
    ) -> bool:
        return self._mutate(
            "set_inline_price", lambda doc: ItemLedger(doc).set_inline_price(name, price, on)
        )

    def set_quantity(
        self,
        name: str,
        month: str | None,
        qty: int,
        on: date | str | None = None,
        source: str = "inlineEdit",
    ) -> int:
        return self._mutate(
            "set_quantity",
            lambda doc: ItemLedger(doc).set_quantity(name, month, qty, on, source),
        )

    def adjust_quantity(
        self, name: str, month: str | None, delta: int, on: date | str | None = None
    ) -> int:
        return self._mutate(
            "adjust_quantity",
            lambda doc: ItemLedger(doc).adjust_quantity(name, month, delta, on),
        )

    def delete_items(self, keys: Iterable[str]) -> list[str]:
        keys = list(keys)
        return self._mutate("delete_items", lambda doc: ItemLedger(doc).delete_items(keys))

    # ------------------------------------------------------------------
    # Sales
    # ------------------------------------------------------------------

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
        return self._mutate(
            "record_sale",
            lambda doc: SalesLedger(doc).record_sale(
                sale_date, buyer, address, contact, item_name, price, qty, manual_profit_per_unit
            ),
        )

    def sales_for_month(self, month: str | None = None) -> list[Sale]:
        return SalesLedger(self._read()).sales_for_month(month)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_items(self, search: str | None = None, month: str | None = None) -> ItemListing:
        return ItemLedger(self._read()).list_items(search, month)

    def get_item(self, name: str) -> Item:
        return ItemLedger(self._read()).require(name)

    def price_history(self) -> list[PriceHistoryRow]:
        return ItemLedger(self._read()).price_history()

    def suggest_sale_price(self, name: str) -> float:
        """Current price of *name*, used to prefill a sale."""
        return resolve_current_price(self.get_item(name))

    # ------------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------------

    def monthly_report(self, month: str | None = None) -> MonthlyReport:
        """Monthly report; refreshes the month's snapshot."""
        return self._mutate(
            "monthly_report",
            lambda doc: ReportAggregator(doc, self._clock).monthly_report(month),
        )

    def sales_report(self, month: str | None = None) -> SalesReport:
        return ReportAggregator(self._read(), self._clock).sales_report(month)

    def yearly_report(self, year: int) -> YearlyReport:
        return ReportAggregator(self._read(), self._clock).yearly_report(year)

    # ------------------------------------------------------------------
    # Export / print
    # ------------------------------------------------------------------

    def render_receipt_text(self, month: str | None = None) -> str:
        return self.exporter.render_receipt(self.monthly_report(month))

    def render_sales_text(self, month: str | None = None) -> str:
        return self.exporter.render_sales(self.sales_report(month))

    def export_receipt(self, month: str | None = None, directory: Path | None = None) -> Path:
        return self.exporter.write_receipt(self.monthly_report(month), directory)

    def export_sales(self, month: str | None = None, directory: Path | None = None) -> Path:
        return self.exporter.write_sales(self.sales_report(month), directory)

    def render_monthly_pdf(self, month: str | None = None) -> bytes:
        return self.pdf_renderer.render_monthly(self.monthly_report(month))

    def render_sales_pdf(self, month: str | None = None) -> bytes:
        return self.pdf_renderer.render_sales(self.sales_report(month))

    def render_yearly_pdf(self, year: int) -> bytes:
        return self.pdf_renderer.render_yearly(self.yearly_report(year))
