"""Plain-text report export."""

from shopledger.infrastructure.export.text_exporter import TextReportExporter, format_amount

__all__ = ["TextReportExporter", "format_amount"]
