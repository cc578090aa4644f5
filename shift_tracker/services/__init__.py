"""Services package."""

from shift_tracker.services.storage import (
    FileShiftStorage,
    InMemoryShiftStorage,
    ShiftStorageInterface,
    StorageError,
    StorageIOError,
)

__all__ = [
    # Storage services
    "FileShiftStorage",
    "InMemoryShiftStorage",
    "ShiftStorageInterface",
    "StorageError",
    "StorageIOError",
]
