"""
Dependency injection container for FastAPI.

Provides service instances to route handlers.
"""

from shopledger.application.ledger_service import LedgerService
from shopledger.application.services import get_ledger_service as _get_ledger_service
from shopledger.config import Settings, get_settings


def get_app_settings() -> Settings:
    """Get application settings."""
    return get_settings()


def get_ledger_service() -> LedgerService:
    """Get the ledger service."""
    return _get_ledger_service()
