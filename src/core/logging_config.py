"""Structured logging configuration.

This module initializes structlog once with a stable JSON format.
Events are rendered by structlog and emitted through stdlib logging,
so applications decide where log lines go and at which level.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

_CONFIGURED = False


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured JSON output.
    """
    _configure_structlog()
    return structlog.get_logger(name)


def configure_logging(level: str = "INFO") -> None:
    """Route rendered log events to stderr at the requested level.

    Args:
        level: Standard logging level name.
    """
    logging.basicConfig(level=level.upper(), format="%(message)s", force=True)


def _configure_structlog() -> None:
    """Apply the shared structlog processor chain on first use."""
    global _CONFIGURED
    if _CONFIGURED:
        return
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    _CONFIGURED = True
