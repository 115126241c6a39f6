"""Computed report structures.

Plain data handed to front ends and exporters; never persisted
except as the totals copied into a MonthlySnapshot.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field

from shopledger.core.entities.sale import Sale


class ItemValuationRow(BaseModel):
    """One item valued at its current price for a month."""

    key: str
    name: str
    price: float
    qty: int
    total: float


class ItemListing(BaseModel):
    """Items table for a month, optionally filtered by name."""

    month: str
    items: list[ItemValuationRow] = Field(default_factory=list)
    grand_total: float = 0.0


class PriceHistoryRow(BaseModel):
    """A price history entry flattened with its item name."""

    name: str
    price: float
    effective_date: date


class SalesReport(BaseModel):
    """Sales of one month with revenue and profit totals."""

    month: str
    sales: list[Sale] = Field(default_factory=list)
    sales_total: float = 0.0
    sales_profit: float = 0.0
    sales_count: int = 0


class MonthlyReport(BaseModel):
    """Stock valuation and sales summary of one month."""

    month: str
    items: list[ItemValuationRow] = Field(default_factory=list)
    items_total: float = 0.0
    sales: list[Sale] = Field(default_factory=list)
    sales_total: float = 0.0
    sales_profit: float = 0.0
    sales_count: int = 0
    generated_at: datetime


class YearlyRow(BaseModel):
    """Totals of one month inside a yearly report."""

    month: str
    items_total: float = 0.0
    sales_total: float = 0.0
    sales_profit: float = 0.0
    combined: float = 0.0
    from_snapshot: bool = False


class YearlyTotals(BaseModel):
    """Sums over the twelve months of a year."""

    items: float = 0.0
    sales: float = 0.0
    profit: float = 0.0
    combined: float = 0.0


class YearlyReport(BaseModel):
    """Month-by-month summary of a calendar year."""

    year: int
    months: list[YearlyRow] = Field(default_factory=list)
    totals: YearlyTotals = Field(default_factory=YearlyTotals)
