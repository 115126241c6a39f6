"""Ledger document storage implementations."""

from shopledger.config import get_settings
from shopledger.core.interfaces.ledger_store import ILedgerStore
from shopledger.infrastructure.storage.json_store import JsonFileLedgerStore
from shopledger.infrastructure.storage.memory_store import InMemoryLedgerStore

_ledger_store: ILedgerStore | None = None


def get_ledger_store() -> ILedgerStore:
    """Get or create the configured ledger store."""
    global _ledger_store
    if _ledger_store is None:
        storage = get_settings().storage
        if storage.backend == "memory":
            _ledger_store = InMemoryLedgerStore()
        else:
            _ledger_store = JsonFileLedgerStore(storage.ledger_path)
    return _ledger_store


def reset_ledger_store() -> None:
    """Drop the cached store (for testing)."""
    global _ledger_store
    _ledger_store = None


__all__ = [
    "JsonFileLedgerStore",
    "InMemoryLedgerStore",
    "get_ledger_store",
    "reset_ledger_store",
]
