"""
FastAPI application factory.

Creates and configures the main application instance.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shopledger.api.middleware import ErrorHandlerMiddleware, LoggingMiddleware
from shopledger.api.middleware.error_handler import setup_exception_handlers
from shopledger.api.routes import (
    health_router,
    items_router,
    reports_router,
    sales_router,
)
from shopledger.config import configure_logging, get_logger, get_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log startup and shutdown with the active storage settings."""
    settings = get_settings()
    logger.info(
        "application_starting",
        host=settings.api.host,
        port=settings.api.port,
        storage_backend=settings.storage.backend,
        ledger_path=str(settings.storage.ledger_path),
    )
    yield
    logger.info("application_stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging()
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Shop inventory, sales and monthly reporting ledger",
        lifespan=lifespan,
        debug=settings.api.debug,
    )

    # Middleware (last added runs first)
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(items_router)
    app.include_router(sales_router)
    app.include_router(reports_router)

    return app


app = create_app()
