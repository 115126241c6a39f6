"""Sales endpoints."""

from fastapi import APIRouter, Depends, Query, status

from shopledger.api.dependencies import get_ledger_service
from shopledger.application.dto.requests import RecordSaleRequest
from shopledger.application.dto.responses import ErrorResponse
from shopledger.application.ledger_service import LedgerService
from shopledger.core.entities import Sale

router = APIRouter(prefix="/api/sales", tags=["sales"])


@router.get("", response_model=list[Sale], response_model_by_alias=False)
def list_sales(
    month: str | None = Query(default=None, description="Month key YYYY-MM"),
    service: LedgerService = Depends(get_ledger_service),
) -> list[Sale]:
    """Sales of a month, oldest first."""
    return service.sales_for_month(month)


@router.post(
    "",
    response_model=Sale,
    response_model_by_alias=False,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def record_sale(
    request: RecordSaleRequest,
    service: LedgerService = Depends(get_ledger_service),
) -> Sale:
    """Record a sale and take the units out of stock."""
    return service.record_sale(
        sale_date=request.sale_date,
        buyer=request.buyer,
        address=request.address,
        contact=request.contact,
        item_name=request.item,
        price=request.price,
        qty=request.qty,
        manual_profit_per_unit=request.manual_profit_per_unit,
    )
