"""Monthly report snapshot entity."""

from datetime import datetime

from shopledger.core.entities.base import LedgerModel


class MonthlySnapshot(LedgerModel):
    """Cached totals of a generated monthly report."""

    generated_at: datetime
    items_total: float = 0.0
    sales_total: float = 0.0
    sales_profit: float = 0.0
    sales_count: int = 0
