"""
Structured Logging

DESIGN DECISION: Every module logs through structlog on top of the
standard library logging machinery. This provides:
1. Machine-readable JSON log lines
2. Key/value context instead of formatted strings
3. One place to decide where logs go

Log output always goes to stderr. stdout belongs to the command-line
report output and must never carry log lines.
"""

import logging
import sys
from typing import Optional

import structlog


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


_HANDLER_NAME = "shift_tracker_stderr"


def configure_logging(level: str = "WARNING") -> None:
    """
    Route log records to stderr at the given level.

    Safe to call more than once: any handler left by an earlier call is
    dropped and a fresh one is bound to the current sys.stderr, which may
    have been swapped out (and closed) since.
    """
    root = logging.getLogger()
    root.setLevel(level.upper())

    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)


def get_logger(name: Optional[str] = None):
    """Get a structlog logger bound to the given name."""
    return structlog.get_logger(name)
