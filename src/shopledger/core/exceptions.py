"""
Domain exceptions for the shop ledger.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class LedgerError(Exception):
    """Base exception for all ledger errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Validation Exceptions
class ValidationError(LedgerError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


# Lookup Exceptions
class NotFoundError(LedgerError):
    """Referenced ledger entry does not exist."""

    pass


class ItemNotFoundError(NotFoundError):
    """Item not found in the ledger."""

    def __init__(self, name: str):
        super().__init__(
            f"Item not found: {name}",
            code="ITEM_NOT_FOUND",
            details={"name": name},
        )


# Storage Exceptions
class StorageError(LedgerError):
    """Base exception for storage operations."""

    pass


class StoreCorruptionError(StorageError):
    """Persisted ledger document could not be decoded.

    Raised inside store implementations only; stores recover by
    returning an empty document.
    """

    def __init__(self, location: str, reason: str):
        super().__init__(
            f"Ledger document at {location} is unreadable: {reason}",
            code="STORE_CORRUPTION",
            details={"location": location, "reason": reason},
        )


class StoreWriteError(StorageError):
    """Persisting the ledger document failed."""

    def __init__(self, location: str, error: str):
        super().__init__(
            f"Failed to save ledger document to {location}: {error}",
            code="STORE_WRITE_FAILED",
            details={"location": location, "error": error},
        )


class ConfigurationError(LedgerError):
    """Configuration error."""

    pass
