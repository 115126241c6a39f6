"""Inventory item domain entities."""

from datetime import date
from enum import Enum

from pydantic import Field

from shopledger.core.entities.base import LedgerModel


class QuantitySource(str, Enum):
    """Origin tags for stock audit entries."""

    ADD_FORM = "addForm"
    INLINE_EDIT = "inlineEdit"
    PLUS = "plus"
    MINUS = "minus"
    SALE = "sale"


class PriceEntry(LedgerModel):
    """A single point in an item's price history."""

    price: float
    effective_date: date = Field(alias="date")


class QuantityChange(LedgerModel):
    """Audit record of one stock change. Never used to derive stock."""

    month: str
    changed_on: date = Field(alias="date")
    delta: int
    source: str


class Item(LedgerModel):
    """An inventory item with its price and per-month stock history."""

    name: str
    price_history: list[PriceEntry] = Field(default_factory=list)
    quantities: dict[str, int] = Field(default_factory=dict)
    qty_history: list[QuantityChange] = Field(default_factory=list)
