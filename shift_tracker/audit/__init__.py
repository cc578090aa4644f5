"""
Logging package.

Named after the audit trail it grew out of; today it only sets up
structured logging for the rest of the package.
"""

from shift_tracker.audit.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
