"""
Structured logging configuration using structlog.

Console output in development, JSON lines elsewhere. Log records go to
stderr so that CLI report output on stdout stays clean.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from shopledger.config.settings import Settings, get_settings

# Event keys holding money amounts; rounded to cents in log output.
MONEY_KEYS = frozenset(
    {"price", "total", "profit", "items_total", "sales_total", "sales_profit"}
)

_HANDLER_NAME = "shopledger"


def add_app_context(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Stamp events with the app identity and active ledger backend."""
    settings = get_settings()
    event_dict["app"] = settings.app_name
    event_dict["version"] = settings.app_version
    event_dict.setdefault("ledger_backend", settings.storage.backend)
    return event_dict


def round_money(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Float money amounts render as 60.0, not 59.99999999."""
    for key in MONEY_KEYS.intersection(event_dict):
        value = event_dict[key]
        if isinstance(value, float):
            event_dict[key] = round(value, 2)
    return event_dict


def _processors(settings: Settings) -> list[Processor]:
    shared: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        round_money,
    ]
    if settings.environment == "development":
        return shared + [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]
    return shared + [
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]


def configure_logging(level: str | None = None) -> None:
    """Configure structlog and the root stdlib handler.

    Safe to call repeatedly: the handler installed by a previous call is
    replaced, so *level* (the CLI passes WARNING) always takes effect.
    """
    settings = get_settings()

    structlog.configure(
        processors=_processors(settings),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root = logging.getLogger()
    for handler in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level or settings.log_level))

    # fpdf2 pulls in fontTools, which is chatty at INFO
    logging.getLogger("fontTools").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)
