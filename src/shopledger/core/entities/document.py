"""The persisted ledger document."""

from typing import Any

from pydantic import Field, field_validator

from shopledger.core.entities.base import LedgerModel
from shopledger.core.entities.item import Item
from shopledger.core.entities.sale import Sale
from shopledger.core.entities.snapshot import MonthlySnapshot


class LedgerDocument(LedgerModel):
    """All ledger state, loaded and saved as one blob.

    ``items`` is keyed by normalized item name, ``monthly_snapshots`` by
    month key (``YYYY-MM``).
    """

    items: dict[str, Item] = Field(default_factory=dict)
    sales: list[Sale] = Field(default_factory=list)
    monthly_snapshots: dict[str, MonthlySnapshot] = Field(default_factory=dict)

    @field_validator("items", "monthly_snapshots", mode="before")
    @classmethod
    def _null_mapping_is_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("sales", mode="before")
    @classmethod
    def _null_list_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @classmethod
    def empty(cls) -> "LedgerDocument":
        """A brand new ledger with no items, sales or snapshots."""
        return cls()
