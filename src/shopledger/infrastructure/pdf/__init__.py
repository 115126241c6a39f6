"""PDF rendering for printed reports."""

from shopledger.infrastructure.pdf.report_pdf_renderer import ReportPdfRenderer

__all__ = ["ReportPdfRenderer"]
