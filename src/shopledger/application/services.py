"""
Service factory functions for dependency injection.

Wires infrastructure implementations to the ledger service.
Front ends (API, CLI) import from here.
"""

from typing import TYPE_CHECKING

from shopledger.application.ledger_service import LedgerService

if TYPE_CHECKING:
    from shopledger.core.interfaces import ILedgerStore


# Singleton service instance
_ledger_service: LedgerService | None = None


def get_ledger_service(store: "ILedgerStore | None" = None) -> LedgerService:
    """
    Get or create the LedgerService instance.

    Uses the configured ledger store unless *store* is given, in which
    case a dedicated (non-cached) service is returned.
    """
    global _ledger_service

    if store is not None:
        return LedgerService(store=store)

    if _ledger_service is None:
        # Lazy import infrastructure to avoid circular imports
        from shopledger.infrastructure.storage import get_ledger_store

        _ledger_service = LedgerService(store=get_ledger_store())
    return _ledger_service


def reset_services() -> None:
    """Reset singleton instances (for testing)."""
    global _ledger_service
    _ledger_service = None
