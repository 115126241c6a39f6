"""
Tab-separated text export of monthly receipts and sales reports.

Files are named ``receipt_<month>.txt`` and ``sales_<month>.txt``.
"""

from pathlib import Path

from shopledger.config import get_logger, get_settings
from shopledger.core.entities import MonthlyReport, SalesReport

logger = get_logger(__name__)

RECEIPT_HEADER = ("Item", "Price", "Qty", "Total")
SALES_HEADER = (
    "Date",
    "Buyer",
    "Contact",
    "Address",
    "Product",
    "Price",
    "Qty",
    "Total",
    "Profit",
)


def format_amount(value: float | None) -> str:
    """Two-decimal money formatting; ``None`` renders as 0.00."""
    return f"{(value or 0):.2f}"


def _clean(text: str) -> str:
    # Embedded tabs/newlines would shift columns.
    return " ".join(text.split())


class TextReportExporter:
    """Renders reports as TSV text and writes them to disk."""

    def __init__(self, shop_name: str | None = None) -> None:
        self.shop_name = shop_name or get_settings().export.shop_name

    @staticmethod
    def receipt_filename(month: str) -> str:
        return f"receipt_{month}.txt"

    @staticmethod
    def sales_filename(month: str) -> str:
        return f"sales_{month}.txt"

    def render_receipt(self, report: MonthlyReport) -> str:
        lines = [f"{self.shop_name} - Receipt for {report.month}", "", "\t".join(RECEIPT_HEADER)]
        for row in report.items:
            lines.append(
                "\t".join(
                    [_clean(row.name), format_amount(row.price), str(row.qty), format_amount(row.total)]
                )
            )
        lines.append("")
        lines.append(f"Grand Total\t\t\t{format_amount(report.items_total)}")
        return "\n".join(lines)

    def render_sales(self, report: SalesReport) -> str:
        lines = [f"{self.shop_name} - Sales Report for {report.month}", "", "\t".join(SALES_HEADER)]
        for sale in report.sales:
            lines.append(
                "\t".join(
                    [
                        sale.sale_date.isoformat(),
                        _clean(sale.buyer),
                        _clean(sale.contact),
                        _clean(sale.address),
                        _clean(sale.item),
                        format_amount(sale.price),
                        str(sale.qty),
                        format_amount(sale.total),
                        format_amount(sale.profit),
                    ]
                )
            )
        lines.append("")
        lines.append(
            "Sales Total" + "\t" * 7
            + f"{format_amount(report.sales_total)}\t{format_amount(report.sales_profit)}"
        )
        return "\n".join(lines)

    def write_receipt(self, report: MonthlyReport, directory: Path | None = None) -> Path:
        return self._write(self.receipt_filename(report.month), self.render_receipt(report), directory)

    def write_sales(self, report: SalesReport, directory: Path | None = None) -> Path:
        return self._write(self.sales_filename(report.month), self.render_sales(report), directory)

    def _write(self, filename: str, content: str, directory: Path | None) -> Path:
        target_dir = Path(directory) if directory is not None else get_settings().export.output_dir
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / filename
        path.write_text(content, encoding="utf-8")
        logger.info("report_exported", path=str(path))
        return path
