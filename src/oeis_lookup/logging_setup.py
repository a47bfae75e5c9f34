"""Structured logging configuration for the OEIS lookup client."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

import structlog
from structlog.stdlib import BoundLogger

_LOGGING_CONFIGURED = False

_SENSITIVE_KEYS = ("authorization", "api_key", "token", "password", "secret", "cookie")


def _redact_secrets_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Remove sensitive header values from the structlog event dictionary."""

    headers = event_dict.get("headers")
    if isinstance(headers, dict):
        event_dict["headers"] = {
            key: "[REDACTED]" if any(s in key.lower() for s in _SENSITIVE_KEYS) else value
            for key, value in headers.items()
        }
    return event_dict


def configure_logging(
    level: str = "WARNING",
    console_format: str = "text",
    log_file: Path | None = None,
    *,
    force: bool = False,
) -> BoundLogger:
    """Configure stdlib handlers and structlog processors.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        console_format: ``text`` for the console renderer, ``json`` for JSON lines.
        log_file: Optional file receiving the same events.
        force: Reconfigure even if logging was configured before.

    Returns:
        The root structlog logger.
    """
    global _LOGGING_CONFIGURED

    if _LOGGING_CONFIGURED and not force:
        return structlog.get_logger()

    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(level=numeric_level, handlers=handlers, format="%(message)s", force=True)

    renderer: Any
    if console_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            _redact_secrets_processor,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    _LOGGING_CONFIGURED = True
    return structlog.get_logger()


def configure_library_defaults(level: int = logging.WARNING) -> None:
    """Drop events below ``level`` until the application configures structlog."""

    if structlog.is_configured():
        return
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(level))


def get_logger(name: str, **initial_values: Any) -> Any:
    """Return a structlog logger bound to ``initial_values``.

    Without initial values the lazy proxy is returned so module-level loggers
    pick up a configuration applied after import.
    """

    logger = structlog.get_logger(name)
    if initial_values:
        return logger.bind(**initial_values)
    return logger


configure_library_defaults()


__all__ = ["configure_library_defaults", "configure_logging", "get_logger"]
