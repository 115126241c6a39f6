"""Request DTOs for API endpoints.

Pydantic v2 models for request parsing. Only shapes and types are
checked here; business validation (non-empty names, positive
quantities, finite prices) belongs to the ledger services.
"""

from datetime import date

from pydantic import BaseModel, Field


class AddItemRequest(BaseModel):
    """Create an item or add stock to an existing one."""

    name: str = Field(..., description="Item display name", examples=["Rice"])
    price: float = Field(..., description="Unit price", examples=[10.0])
    qty: int = Field(..., description="Quantity to add", examples=[50])
    entry_date: date | None = Field(
        default=None,
        description="Date of the entry (defaults to today); selects the stock month",
    )


class UpdatePriceRequest(BaseModel):
    """Record a new price point for an item."""

    price: float = Field(..., description="New unit price", examples=[11.0])
    entry_date: date | None = Field(default=None, description="Price effective date")


class SetQuantityRequest(BaseModel):
    """Overwrite the stock of a month."""

    qty: int = Field(..., description="New stock level (negative values clamp to 0)")
    month: str | None = Field(
        default=None,
        description="Month key YYYY-MM (defaults to the current month)",
        examples=["2024-01"],
    )
    entry_date: date | None = Field(default=None, description="Date recorded in the audit trail")


class AdjustQuantityRequest(BaseModel):
    """Step the stock of a month by one unit."""

    delta: int = Field(..., description="+1 or -1", examples=[1, -1])
    month: str | None = Field(default=None, description="Month key YYYY-MM")
    entry_date: date | None = Field(default=None, description="Date recorded in the audit trail")


class DeleteItemsRequest(BaseModel):
    """Delete items and all their history."""

    keys: list[str] = Field(..., description="Item keys (normalized names)", examples=[["rice"]])


class RecordSaleRequest(BaseModel):
    """Record a sale against an item."""

    sale_date: date = Field(..., description="Date of the sale")
    buyer: str = Field(..., examples=["Ali"])
    address: str = Field(..., examples=["12 Market St"])
    contact: str = Field(..., examples=["0550 000 000"])
    item: str = Field(..., description="Item name", examples=["Rice"])
    price: float = Field(..., description="Selling price per unit", examples=[12.0])
    qty: int = Field(..., description="Units sold", examples=[5])
    manual_profit_per_unit: float | None = Field(
        default=None,
        description="Override profit per unit instead of price minus current cost",
    )
