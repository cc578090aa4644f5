"""
Data Models Package

This package contains the Pydantic models used throughout Shift Tracker.
Every shift that is loaded, added or reported on is a Shift instance.
"""

from shift_tracker.models.report import ShiftSummary
from shift_tracker.models.result import ErrorKind, OperationResult
from shift_tracker.models.shift import (
    DELIMITER,
    FormatError,
    Shift,
    format_number,
)

__all__ = [
    # Shift model
    "DELIMITER",
    "FormatError",
    "Shift",
    "format_number",
    # Results and reports
    "ErrorKind",
    "OperationResult",
    "ShiftSummary",
]
