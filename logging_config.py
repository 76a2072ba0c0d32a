"""
Structured logging configuration for the simulator.

The game transcript is printed directly; this logger carries diagnostics such
as rejected builds, bank shortages and configuration fallbacks.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog


def configure_logging(verbose: bool = False):
    """Configure stdlib logging and structlog for console output."""
    level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )

    return structlog.get_logger()


def get_logger(name: Optional[str] = None):
    """Get a logger instance, optionally bound to a module name."""
    if name:
        return structlog.get_logger(name)
    return structlog.get_logger()
