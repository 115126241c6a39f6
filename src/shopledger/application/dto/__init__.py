"""Data transfer objects for the API layer."""

from shopledger.application.dto.requests import (
    AddItemRequest,
    AdjustQuantityRequest,
    DeleteItemsRequest,
    RecordSaleRequest,
    SetQuantityRequest,
    UpdatePriceRequest,
)
from shopledger.application.dto.responses import (
    DeleteItemsResponse,
    ErrorResponse,
    HealthResponse,
    InlinePriceResponse,
    QuantityResponse,
    SuggestedPriceResponse,
)

__all__ = [
    # Requests
    "AddItemRequest",
    "AdjustQuantityRequest",
    "DeleteItemsRequest",
    "RecordSaleRequest",
    "SetQuantityRequest",
    "UpdatePriceRequest",
    # Responses
    "DeleteItemsResponse",
    "ErrorResponse",
    "HealthResponse",
    "InlinePriceResponse",
    "QuantityResponse",
    "SuggestedPriceResponse",
]
