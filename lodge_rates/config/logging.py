"""Structured logging configuration using structlog.

The request middleware binds ``origin`` and ``path`` as structlog context
variables, so every event logged while serving a request carries them and
is prefixed with the caller's origin.
"""
import logging
import sys
from typing import Any

import structlog
from pythonjsonlogger import jsonlogger

from lodge_rates.config.settings import LoggingSettings, settings

NOISY_LOGGERS = ("httpcore", "httpx", "uvicorn.access")


def add_origin_prefix(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Prefix the event with [origin] when a request origin is known."""
    origin = event_dict.get("origin")
    if origin:
        event_dict["event"] = f"[{origin}] {event_dict.get('event', '')}"
    return event_dict


def _build_handler(logging_settings: LoggingSettings) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    if logging_settings.format == "json":
        handler.setFormatter(jsonlogger.JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
    return handler


def _build_processors(logging_settings: LoggingSettings) -> list[Any]:
    renderer = (
        structlog.processors.JSONRenderer()
        if logging_settings.format == "json"
        else structlog.dev.ConsoleRenderer()
    )
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        add_origin_prefix,
        renderer,
    ]


def configure_logging(logging_settings: LoggingSettings | None = None) -> None:
    """Route structlog through the root logger at the configured level."""
    logging_settings = logging_settings or settings.logging
    log_level = getattr(logging, logging_settings.level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(_build_handler(logging_settings))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.configure(
        processors=_build_processors(logging_settings),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Get a configured logger instance."""
    return structlog.get_logger(name)
