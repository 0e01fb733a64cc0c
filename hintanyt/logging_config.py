"""
Structured logging setup using structlog.
Logs go to stderr so stdout stays free for the dashboard and the summary.
"""

import logging
import sys
from typing import Any

import structlog
from structlog._config import BoundLoggerLazyProxy


def setup_logging(log_level: str = "WARNING", log_format: str = "text") -> None:
    """
    Configure structlog for the process.

    Args:
        log_level: Minimum level name (DEBUG, INFO, WARNING, ...).
        log_format: "json" for machine readable lines, "text" for console output.
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    if log_format == "json":
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str):
    """
    Return a lazy logger proxy for the given module name.

    The proxy resolves the configuration on every call, so module-level
    loggers created before setup_logging() still honour it.
    """
    return BoundLoggerLazyProxy(None, initial_values={"logger": name}, logger_factory_args=())
