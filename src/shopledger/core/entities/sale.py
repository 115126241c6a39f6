"""Sale transaction entity."""

from datetime import date

from pydantic import ConfigDict, Field

from shopledger.core.entities.base import LedgerModel


class Sale(LedgerModel):
    """A recorded sale. Immutable once created.

    ``item`` is the item's display name at the time of sale, not a
    reference, so renaming or deleting the item leaves the sale intact.
    """

    model_config = ConfigDict(frozen=True)

    sale_date: date = Field(alias="date")
    buyer: str
    address: str
    contact: str
    item: str
    price: float
    qty: int
    total: float
    profit: float = 0.0
    profit_is_manual: bool = False
