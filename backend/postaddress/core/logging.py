from __future__ import annotations

import logging
from typing import Any, Literal

import structlog


LogFormat = Literal["console", "json"]


def _renderer(log_format: LogFormat) -> Any:
    if log_format == "console":
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def configure_logging(debug: bool = False, log_format: LogFormat | None = None) -> None:
    """Configure structlog for the address service.

    Without an explicit format, debug runs render for the console and
    everything else renders JSON lines.
    """

    level = logging.DEBUG if debug else logging.INFO
    if log_format is None:
        log_format = "console" if debug else "json"

    logging.basicConfig(format="%(message)s", level=level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            _renderer(log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )


def get_logger(*args: Any, **kwargs: Any) -> structlog.BoundLogger:
    return structlog.get_logger(*args, **kwargs)
