"""Report endpoints: JSON, text export and printable PDF."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response

from shopledger.api.dependencies import get_ledger_service
from shopledger.application.dto.responses import ErrorResponse
from shopledger.application.ledger_service import LedgerService
from shopledger.core.entities import MonthlyReport, SalesReport, YearlyReport
from shopledger.core.periods import parse_month
from shopledger.infrastructure.export import TextReportExporter

router = APIRouter(prefix="/api/reports", tags=["reports"])

_ERRORS = {400: {"model": ErrorResponse}}


def _attachment(filename: str) -> dict[str, str]:
    return {"Content-Disposition": f'attachment; filename="{filename}"'}


@router.get(
    "/monthly/{month}",
    response_model=MonthlyReport,
    response_model_by_alias=False,
    responses=_ERRORS,
)
def monthly_report(
    month: str,
    service: LedgerService = Depends(get_ledger_service),
) -> MonthlyReport:
    """Stock valuation and sales for a month. Refreshes the month's snapshot."""
    return service.monthly_report(month)


@router.get("/monthly/{month}/export", response_class=PlainTextResponse, responses=_ERRORS)
def export_monthly(
    month: str,
    service: LedgerService = Depends(get_ledger_service),
) -> PlainTextResponse:
    """Monthly receipt as a tab-separated text file."""
    month = parse_month(month)
    return PlainTextResponse(
        service.render_receipt_text(month),
        headers=_attachment(TextReportExporter.receipt_filename(month)),
    )


@router.get("/monthly/{month}/pdf", responses=_ERRORS)
def print_monthly(
    month: str,
    service: LedgerService = Depends(get_ledger_service),
) -> Response:
    """Printable monthly receipt."""
    month = parse_month(month)
    return Response(
        content=service.render_monthly_pdf(month),
        media_type="application/pdf",
        headers=_attachment(f"receipt_{month}.pdf"),
    )


@router.get(
    "/sales/{month}",
    response_model=SalesReport,
    response_model_by_alias=False,
    responses=_ERRORS,
)
def sales_report(
    month: str,
    service: LedgerService = Depends(get_ledger_service),
) -> SalesReport:
    """Sales of a month with revenue and profit totals."""
    return service.sales_report(month)


@router.get("/sales/{month}/export", response_class=PlainTextResponse, responses=_ERRORS)
def export_sales(
    month: str,
    service: LedgerService = Depends(get_ledger_service),
) -> PlainTextResponse:
    """Sales report as a tab-separated text file."""
    month = parse_month(month)
    return PlainTextResponse(
        service.render_sales_text(month),
        headers=_attachment(TextReportExporter.sales_filename(month)),
    )


@router.get("/sales/{month}/pdf", responses=_ERRORS)
def print_sales(
    month: str,
    service: LedgerService = Depends(get_ledger_service),
) -> Response:
    """Printable sales report."""
    month = parse_month(month)
    return Response(
        content=service.render_sales_pdf(month),
        media_type="application/pdf",
        headers=_attachment(f"sales_{month}.pdf"),
    )


@router.get("/yearly/{year}", response_model=YearlyReport, responses=_ERRORS)
def yearly_report(
    year: int,
    service: LedgerService = Depends(get_ledger_service),
) -> YearlyReport:
    """Twelve-month summary, using snapshots where available."""
    return service.yearly_report(year)


@router.get("/yearly/{year}/pdf", responses=_ERRORS)
def print_yearly(
    year: int,
    service: LedgerService = Depends(get_ledger_service),
) -> Response:
    """Printable yearly summary."""
    return Response(
        content=service.render_yearly_pdf(year),
        media_type="application/pdf",
        headers=_attachment(f"yearly_{year}.pdf"),
    )
