"""
Health check endpoints.
"""

import time

from fastapi import APIRouter, Depends

from shopledger.api.dependencies import get_app_settings, get_ledger_service
from shopledger.application.dto.responses import HealthResponse
from shopledger.application.ledger_service import LedgerService
from shopledger.config import Settings

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
def health_check(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """
    Basic health check.

    Returns service status and uptime.
    """
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        uptime_seconds=time.time() - _start_time,
    )


@router.get("/ledger", response_model=HealthResponse)
def ledger_health(
    service: LedgerService = Depends(get_ledger_service),
    settings: Settings = Depends(get_app_settings),
) -> HealthResponse:
    """
    Ledger store check.

    Loads the document and reports how many items it holds.
    """
    listing = service.list_items()
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        uptime_seconds=time.time() - _start_time,
        items=len(listing.items),
    )
