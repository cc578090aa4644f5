"""
In-Memory Shift Storage

Keeps shifts in a plain list. Useful for tests and for embedding the
tracker where nothing should touch the filesystem.
"""

from typing import Optional, Sequence

from shift_tracker.models.shift import Shift
from shift_tracker.services.storage.interface import (
    ShiftStorageInterface,
    StorageIOError,
)


class InMemoryShiftStorage(ShiftStorageInterface):
    """
    List-backed implementation of shift storage.

    Args:
        initial: Shifts the store starts out holding
        fail_on_save: Make every save raise StorageIOError
    """

    def __init__(
        self,
        initial: Optional[Sequence[Shift]] = None,
        fail_on_save: bool = False,
    ):
        self._shifts: list[Shift] = list(initial or [])
        self.fail_on_save = fail_on_save
        self.save_count = 0

    def load(self) -> list[Shift]:
        return list(self._shifts)

    def save(self, shifts: Sequence[Shift]) -> None:
        if self.fail_on_save:
            raise StorageIOError("In-memory store is not writable")
        self._shifts = list(shifts)
        self.save_count += 1
