"""Shared base model for persisted ledger entities."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LedgerModel(BaseModel):
    """Base for entities stored in the ledger document.

    Field names are snake_case in Python and camelCase in the stored
    document, so documents written by the browser ledger load unchanged.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
