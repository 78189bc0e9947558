"""Logging configuration for the Delivery domain."""

import logging
import os

import structlog


def configure_logging(level: str | None = None) -> None:
    """Route structlog through stdlib logging at the configured level.

    ``LOG_FORMAT=json`` switches the console renderer for a JSON one, which
    is what the production containers ship to the log collector.
    """
    level_name = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(format="%(message)s", level=numeric_level)

    # Suppress noisy library loggers
    logging.getLogger("protean").setLevel(logging.WARNING)

    if os.environ.get("LOG_FORMAT", "console") == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str):
    return structlog.get_logger(name)
