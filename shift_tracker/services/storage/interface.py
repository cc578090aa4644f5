"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for storage operations.
This allows us to:
1. Keep the tracker independent of where shifts physically live
2. Use in-memory storage for testing
3. Add other backends (e.g. a database) without touching the tracker

The interface is deliberately tiny: load everything, save everything.
There is no incremental append. Every save rewrites the full collection.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from shift_tracker.models.result import ErrorKind, OperationResult
from shift_tracker.models.shift import FormatError, Shift


class ShiftStorageInterface(ABC):
    """
    Abstract interface for shift storage.

    Any storage implementation (text file, in-memory, etc.)
    must implement load and save.
    """

    @abstractmethod
    def load(self) -> list[Shift]:
        """
        Load every stored shift.

        Returns:
            All shifts in stored order. An empty list if the backing
            store does not exist yet.

        Raises:
            StorageIOError: If the store exists but cannot be read
            FormatError: If any stored record cannot be decoded
        """
        pass

    @abstractmethod
    def save(self, shifts: Sequence[Shift]) -> None:
        """
        Replace the entire store with the given shifts, in order.

        Args:
            shifts: The full collection to persist

        Raises:
            StorageIOError: If the store cannot be written
        """
        pass

    def try_load(self) -> OperationResult[list[Shift]]:
        """Load, returning a result instead of raising."""
        try:
            return OperationResult[list[Shift]].ok(self.load())
        except FormatError as e:
            return OperationResult[list[Shift]].failure(ErrorKind.FORMAT, str(e))
        except StorageIOError as e:
            return OperationResult[list[Shift]].failure(ErrorKind.IO, str(e))

    def try_save(self, shifts: Sequence[Shift]) -> OperationResult[int]:
        """Save, returning a result holding the number of records written."""
        try:
            self.save(shifts)
            return OperationResult[int].ok(len(shifts))
        except StorageIOError as e:
            return OperationResult[int].failure(ErrorKind.IO, str(e))


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class StorageIOError(StorageError):
    """The backing store could not be read or written."""
    pass
