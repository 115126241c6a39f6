"""API route modules."""

from shopledger.api.routes.health import router as health_router
from shopledger.api.routes.items import router as items_router
from shopledger.api.routes.reports import router as reports_router
from shopledger.api.routes.sales import router as sales_router

__all__ = [
    "health_router",
    "items_router",
    "sales_router",
    "reports_router",
]
