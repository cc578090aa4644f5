"""
Storage Services Package

Provides the abstract storage interface and its implementations.
The text file backend is the default; the in-memory one backs tests.
"""

from shift_tracker.services.storage.interface import (
    ShiftStorageInterface,
    StorageError,
    StorageIOError,
)
from shift_tracker.services.storage.file_storage import FileShiftStorage
from shift_tracker.services.storage.memory import InMemoryShiftStorage

__all__ = [
    # Interfaces
    "ShiftStorageInterface",
    # Exceptions
    "StorageError",
    "StorageIOError",
    # Implementations
    "FileShiftStorage",
    "InMemoryShiftStorage",
]
