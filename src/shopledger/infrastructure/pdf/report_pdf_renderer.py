"""
Print-ready report rendering using fpdf2.

Produces PDF bytes for the monthly receipt, the monthly sales report
and the yearly summary. Tables use a dark header row and alternating
row shading; every page carries a footer with page numbers.
"""

from datetime import UTC, datetime

from fpdf import FPDF
from fpdf.enums import XPos, YPos

from shopledger.config.settings import PdfSettings, get_settings
from shopledger.core.entities import MonthlyReport, Sale, SalesReport, YearlyReport
from shopledger.infrastructure.export.text_exporter import format_amount

SALES_COLUMNS = [
    ("Date", 20, "L"),
    ("Buyer", 26, "L"),
    ("Contact", 22, "L"),
    ("Address", 30, "L"),
    ("Product", 28, "L"),
    ("Price", 16, "R"),
    ("Qty", 10, "R"),
    ("Total", 20, "R"),
    ("Profit", 18, "R"),
]


def _latin1(text: str) -> str:
    """Core PDF fonts only cover latin-1; replace anything else with '?'."""
    return text.encode("latin-1", errors="replace").decode("latin-1")


class _ReportPdf(FPDF):
    """FPDF subclass that renders a footer on every page."""

    def __init__(self, pdf_settings: PdfSettings) -> None:
        super().__init__()
        self._pdf_settings = pdf_settings
        self._generation_date = datetime.now(UTC).strftime("%Y-%m-%d %H:%M UTC")

    def footer(self) -> None:
        self.set_y(-15)
        self.set_font("Helvetica", "I", 8)
        self.cell(0, 5, _latin1(self._pdf_settings.footer_text), align="L")
        self.set_x(-60)
        self.cell(
            0,
            5,
            f"Page {self.page_no()} of {{nb}} | {self._generation_date}",
            align="R",
        )


class ReportPdfRenderer:
    """Renders ledger reports into PDF bytes."""

    def __init__(self, pdf_settings: PdfSettings | None = None) -> None:
        if pdf_settings is None:
            pdf_settings = get_settings().pdf
        self._settings = pdf_settings

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render_monthly(self, report: MonthlyReport) -> bytes:
        """Receipt for a month: valued stock, then the month's sales."""
        pdf = self._new_document(f"Receipt - {report.month}")

        self._render_table(
            pdf,
            [("Item", 90, "L"), ("Price", 30, "R"), ("Qty", 25, "R"), ("Total", 45, "R")],
            [
                [row.name, format_amount(row.price), str(row.qty), format_amount(row.total)]
                for row in report.items
            ],
        )
        self._render_total_line(pdf, "Grand Total", format_amount(report.items_total))

        pdf.ln(4)
        pdf.set_font("Helvetica", "", 10)
        pdf.cell(
            0, 6,
            f"Sales this month: {report.sales_count} | "
            f"Revenue: {format_amount(report.sales_total)} | "
            f"Profit: {format_amount(report.sales_profit)}",
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )

        if report.sales:
            pdf.ln(3)
            pdf.set_font("Helvetica", "B", 12)
            pdf.cell(0, 8, "Sales Details", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
            self._render_sales_table(pdf, report.sales)
            self._render_total_line(
                pdf,
                "Sales Total",
                f"{format_amount(report.sales_total)} / {format_amount(report.sales_profit)}",
            )

        return bytes(pdf.output())

    def render_sales(self, report: SalesReport) -> bytes:
        """Sales report for a month."""
        pdf = self._new_document(f"Sales Report - {report.month}")
        self._render_sales_table(pdf, report.sales)
        self._render_total_line(
            pdf,
            "Sales Total",
            f"{format_amount(report.sales_total)} / {format_amount(report.sales_profit)}",
        )
        return bytes(pdf.output())

    def render_yearly(self, report: YearlyReport) -> bytes:
        """Yearly summary, one row per month plus totals."""
        pdf = self._new_document(f"Yearly Summary - {report.year}")
        columns = [
            ("Month", 30, "L"),
            ("Items Total", 40, "R"),
            ("Sales Revenue", 40, "R"),
            ("Sales Profit", 40, "R"),
            ("Combined", 40, "R"),
        ]
        rows = [
            [
                r.month,
                format_amount(r.items_total),
                format_amount(r.sales_total),
                format_amount(r.sales_profit),
                format_amount(r.combined),
            ]
            for r in report.months
        ]
        rows.append(
            [
                "Totals",
                format_amount(report.totals.items),
                format_amount(report.totals.sales),
                format_amount(report.totals.profit),
                format_amount(report.totals.combined),
            ]
        )
        self._render_table(pdf, columns, rows, bold_last=True)
        return bytes(pdf.output())

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def _new_document(self, title: str) -> _ReportPdf:
        pdf = _ReportPdf(self._settings)
        pdf.alias_nb_pages()
        pdf.set_auto_page_break(auto=True, margin=20)
        pdf.add_page()
        self._render_header(pdf, title)
        return pdf

    def _render_header(self, pdf: FPDF, title: str) -> None:
        pdf.set_font("Helvetica", "B", 10)
        pdf.cell(
            0, 5, _latin1(self._settings.company_name),
            new_x=XPos.LMARGIN, new_y=YPos.NEXT,
        )
        pdf.set_font("Helvetica", "", 8)
        if self._settings.company_address:
            pdf.cell(
                0, 4, _latin1(self._settings.company_address),
                new_x=XPos.LMARGIN, new_y=YPos.NEXT,
            )
        if self._settings.company_phone:
            pdf.cell(
                0, 4, _latin1(f"Tel: {self._settings.company_phone}"),
                new_x=XPos.LMARGIN, new_y=YPos.NEXT,
            )

        pdf.ln(4)
        pdf.set_font("Helvetica", "B", 16)
        pdf.cell(0, 10, _latin1(title), align="C", new_x=XPos.LMARGIN, new_y=YPos.NEXT)

        y = pdf.get_y()
        pdf.set_draw_color(100, 100, 100)
        pdf.line(10, y, 200, y)
        pdf.set_draw_color(0, 0, 0)
        pdf.ln(4)

    def _render_sales_table(self, pdf: FPDF, sales: list[Sale]) -> None:
        self._render_table(
            pdf,
            SALES_COLUMNS,
            [
                [
                    sale.sale_date.isoformat(),
                    sale.buyer,
                    sale.contact,
                    sale.address,
                    sale.item,
                    format_amount(sale.price),
                    str(sale.qty),
                    format_amount(sale.total),
                    format_amount(sale.profit),
                ]
                for sale in sales
            ],
            font_size=7,
        )

    @staticmethod
    def _render_table(
        pdf: FPDF,
        columns: list[tuple[str, int, str]],
        rows: list[list[str]],
        font_size: int = 9,
        bold_last: bool = False,
    ) -> None:
        pdf.set_font("Helvetica", "B", font_size)
        pdf.set_fill_color(70, 70, 70)
        pdf.set_text_color(255, 255, 255)
        for header, width, _ in columns:
            pdf.cell(width, 7, header, border=1, fill=True, align="C")
        pdf.ln()
        pdf.set_text_color(0, 0, 0)

        for idx, row in enumerate(rows, 1):
            last = bold_last and idx == len(rows)
            pdf.set_font("Helvetica", "B" if last else "", font_size)
            fill = idx % 2 == 0
            if fill:
                pdf.set_fill_color(240, 240, 240)
            for (_, width, align), value in zip(columns, row):
                # Truncate to keep one line per cell.
                max_chars = max(4, int(width / (font_size * 0.2)))
                pdf.cell(width, 6, _latin1(value[:max_chars]), border=1, align=align, fill=fill)
            pdf.ln()

    @staticmethod
    def _render_total_line(pdf: FPDF, label: str, value: str) -> None:
        pdf.set_font("Helvetica", "B", 10)
        pdf.cell(130, 8, label, align="R")
        pdf.cell(60, 8, value, align="R", new_x=XPos.LMARGIN, new_y=YPos.NEXT)
