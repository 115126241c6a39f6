"""JSON encoding of the ledger document."""

from pydantic import ValidationError as PydanticValidationError

from shopledger.core.entities import LedgerDocument
from shopledger.core.exceptions import StoreCorruptionError


def encode_document(document: LedgerDocument, indent: int | None = None) -> str:
    """Serialize with the stored (camelCase) field names."""
    return document.model_dump_json(by_alias=True, indent=indent)


def decode_document(raw: str | bytes, location: str) -> LedgerDocument:
    """Parse a stored document.

    Absent or null top-level containers are filled with empty ones. Anything
    that is not a valid document raises StoreCorruptionError.
    """
    try:
        return LedgerDocument.model_validate_json(raw)
    except PydanticValidationError as e:
        raise StoreCorruptionError(location, f"{e.error_count()} invalid field(s)") from e
    except (UnicodeDecodeError, ValueError) as e:
        raise StoreCorruptionError(location, str(e)) from e
