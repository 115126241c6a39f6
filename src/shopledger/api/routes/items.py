"""Item ledger endpoints."""

from fastapi import APIRouter, Depends, Query, status

from shopledger.api.dependencies import get_ledger_service
from shopledger.application.dto.requests import (
    AddItemRequest,
    AdjustQuantityRequest,
    DeleteItemsRequest,
    SetQuantityRequest,
    UpdatePriceRequest,
)
from shopledger.application.dto.responses import (
    DeleteItemsResponse,
    ErrorResponse,
    InlinePriceResponse,
    QuantityResponse,
    SuggestedPriceResponse,
)
from shopledger.application.ledger_service import LedgerService
from shopledger.core.entities import Item, ItemListing, PriceHistoryRow
from shopledger.core.periods import parse_month

router = APIRouter(prefix="/api/items", tags=["items"])


@router.get("", response_model=ItemListing)
def list_items(
    search: str | None = Query(default=None, description="Case-insensitive name filter"),
    month: str | None = Query(default=None, description="Month key YYYY-MM"),
    service: LedgerService = Depends(get_ledger_service),
) -> ItemListing:
    """List items with current price and stock for a month."""
    return service.list_items(search=search, month=month)


@router.post(
    "",
    response_model=Item,
    response_model_by_alias=False,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def add_item(
    request: AddItemRequest,
    service: LedgerService = Depends(get_ledger_service),
) -> Item:
    """Create an item or add stock to an existing one."""
    return service.add_item(request.name, request.price, request.qty, request.entry_date)


@router.post("/delete", response_model=DeleteItemsResponse)
def delete_items(
    request: DeleteItemsRequest,
    service: LedgerService = Depends(get_ledger_service),
) -> DeleteItemsResponse:
    """Delete items with all their history. Irreversible."""
    return DeleteItemsResponse(removed=service.delete_items(request.keys))


@router.get("/price-history", response_model=list[PriceHistoryRow])
def price_history(
    service: LedgerService = Depends(get_ledger_service),
) -> list[PriceHistoryRow]:
    """Price history of all items."""
    return service.price_history()


@router.get(
    "/{name}",
    response_model=Item,
    response_model_by_alias=False,
    responses={404: {"model": ErrorResponse}},
)
def get_item(
    name: str,
    service: LedgerService = Depends(get_ledger_service),
) -> Item:
    """Get one item with its full history."""
    return service.get_item(name)


@router.get(
    "/{name}/suggested-price",
    response_model=SuggestedPriceResponse,
    responses={404: {"model": ErrorResponse}},
)
def suggested_price(
    name: str,
    service: LedgerService = Depends(get_ledger_service),
) -> SuggestedPriceResponse:
    """Current price of an item, to prefill a sale."""
    item = service.get_item(name)
    return SuggestedPriceResponse(name=item.name, price=service.suggest_sale_price(name))


@router.put(
    "/{name}/price",
    response_model=Item,
    response_model_by_alias=False,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def update_price(
    name: str,
    request: UpdatePriceRequest,
    service: LedgerService = Depends(get_ledger_service),
) -> Item:
    """Record a new price point (always appended)."""
    return service.update_price(name, request.price, request.entry_date)


@router.patch(
    "/{name}/price",
    response_model=InlinePriceResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def edit_price(
    name: str,
    request: UpdatePriceRequest,
    service: LedgerService = Depends(get_ledger_service),
) -> InlinePriceResponse:
    """Inline price edit: appended only when the price changes."""
    changed = service.set_inline_price(name, request.price, request.entry_date)
    item = service.get_item(name)
    return InlinePriceResponse(name=item.name, price=request.price, changed=changed)


@router.put(
    "/{name}/quantity",
    response_model=QuantityResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def set_quantity(
    name: str,
    request: SetQuantityRequest,
    service: LedgerService = Depends(get_ledger_service),
) -> QuantityResponse:
    """Overwrite the stock of a month."""
    month = parse_month(request.month)
    qty = service.set_quantity(name, month, request.qty, request.entry_date)
    return QuantityResponse(name=service.get_item(name).name, month=month, qty=qty)


@router.post(
    "/{name}/quantity/adjust",
    response_model=QuantityResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def adjust_quantity(
    name: str,
    request: AdjustQuantityRequest,
    service: LedgerService = Depends(get_ledger_service),
) -> QuantityResponse:
    """Step the stock of a month by +1 or -1."""
    month = parse_month(request.month)
    qty = service.adjust_quantity(name, month, request.delta, request.entry_date)
    return QuantityResponse(name=service.get_item(name).name, month=month, qty=qty)
