"""
Request logging middleware.

Binds a short request id into structlog's context for the duration of
the request, so events logged by the ledger service while handling it
(``sale_recorded``, ``ledger_operation_rejected``...) carry the same id.
"""

import time
import uuid
from collections.abc import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from shopledger.config import get_logger

logger = get_logger(__name__)

# Requests that change the ledger document.
MUTATING_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request and sets X-Request-ID / X-Response-Time."""

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request_id = uuid.uuid4().hex[:8]
        request.state.request_id = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "request_failed",
                method=request.method,
                path=request.url.path,
                error=str(e),
            )
            raise
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            structlog.contextvars.unbind_contextvars("request_id")

        log = logger.info if request.method in MUTATING_METHODS else logger.debug
        if response.status_code >= 400:
            log = logger.warning
        log(
            "request_completed",
            request_id=request_id,
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round(elapsed_ms, 2),
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{elapsed_ms:.2f}ms"
        return response
