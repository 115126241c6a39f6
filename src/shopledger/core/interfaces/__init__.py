"""Core interfaces (ports) for dependency injection."""

from shopledger.core.interfaces.ledger_store import ILedgerStore

__all__ = ["ILedgerStore"]
