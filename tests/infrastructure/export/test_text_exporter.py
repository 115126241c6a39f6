"""Tests for the tab-separated report exporter."""

from datetime import UTC, date, datetime

from shopledger.core.entities import ItemValuationRow, MonthlyReport, Sale, SalesReport
from shopledger.infrastructure.export import TextReportExporter, format_amount


def _monthly_report() -> MonthlyReport:
    return MonthlyReport(
        month="2024-01",
        items=[
            ItemValuationRow(key="flour", name="Flour", price=4.0, qty=3, total=12.0),
            ItemValuationRow(key="rice", name="Rice", price=10.0, qty=45, total=450.0),
        ],
        items_total=462.0,
        generated_at=datetime(2024, 2, 1, tzinfo=UTC),
    )


def _sales_report() -> SalesReport:
    sale = Sale(
        sale_date=date(2024, 1, 10),
        buyer="Ali\tBaba",
        address="12 Market St\nDowntown",
        contact="0550",
        item="Rice",
        price=12.0,
        qty=5,
        total=60.0,
        profit=10.0,
    )
    return SalesReport(month="2024-01", sales=[sale], sales_total=60.0, sales_profit=10.0, sales_count=1)


class TestFormatAmount:
    def test_two_decimals(self):
        assert format_amount(5) == "5.00"
        assert format_amount(1.005) in ("1.00", "1.01")
        assert format_amount(None) == "0.00"


class TestTextReportExporter:
    """Tests for TextReportExporter."""

    def test_receipt_layout(self):
        text = TextReportExporter(shop_name="Corner Shop").render_receipt(_monthly_report())
        assert text.splitlines() == [
            "Corner Shop - Receipt for 2024-01",
            "",
            "Item\tPrice\tQty\tTotal",
            "Flour\t4.00\t3\t12.00",
            "Rice\t10.00\t45\t450.00",
            "",
            "Grand Total\t\t\t462.00",
        ]

    def test_sales_layout(self):
        lines = TextReportExporter(shop_name="Corner Shop").render_sales(_sales_report()).splitlines()
        assert lines[0] == "Corner Shop - Sales Report for 2024-01"
        assert lines[2] == "Date\tBuyer\tContact\tAddress\tProduct\tPrice\tQty\tTotal\tProfit"
        assert lines[3] == "2024-01-10\tAli Baba\t0550\t12 Market St Downtown\tRice\t12.00\t5\t60.00\t10.00"
        assert lines[-1] == "Sales Total\t\t\t\t\t\t\t60.00\t10.00"
        assert len(lines[-1].split("\t")) == 9

    def test_default_shop_name_from_settings(self, monkeypatch):
        from shopledger.config import reset_settings

        monkeypatch.setenv("EXPORT_SHOP_NAME", "Baraka Store")
        reset_settings()
        assert TextReportExporter().shop_name == "Baraka Store"

    def test_filenames(self):
        assert TextReportExporter.receipt_filename("2024-01") == "receipt_2024-01.txt"
        assert TextReportExporter.sales_filename("2024-01") == "sales_2024-01.txt"

    def test_write_files(self, tmp_path):
        exporter = TextReportExporter(shop_name="Corner Shop")
        receipt = exporter.write_receipt(_monthly_report(), tmp_path / "out")
        sales = exporter.write_sales(_sales_report(), tmp_path / "out")
        assert receipt == tmp_path / "out" / "receipt_2024-01.txt"
        assert receipt.read_text(encoding="utf-8").startswith("Corner Shop - Receipt for 2024-01")
        assert sales.exists()

    def test_empty_sales(self):
        report = SalesReport(month="2024-03")
        lines = TextReportExporter(shop_name="S").render_sales(report).splitlines()
        assert len(lines) == 5
        assert lines[-1].endswith("0.00\t0.00")
