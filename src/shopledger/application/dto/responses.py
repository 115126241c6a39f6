"""Response DTOs for API endpoints.

Report payloads reuse the core report models directly; the DTOs below
cover mutation results, health and errors.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class QuantityResponse(BaseModel):
    """Stock level after a quantity change."""

    name: str
    month: str
    qty: int


class InlinePriceResponse(BaseModel):
    """Result of an inline price edit."""

    name: str
    price: float
    changed: bool


class SuggestedPriceResponse(BaseModel):
    """Current price of an item, used to prefill a sale."""

    name: str
    price: float


class DeleteItemsResponse(BaseModel):
    """Keys removed by a delete request."""

    removed: list[str] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    items: int | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. ITEM_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)
