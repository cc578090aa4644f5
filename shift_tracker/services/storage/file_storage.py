"""
File-backed Shift Storage

DESIGN DECISION: Shifts live in a plain comma-delimited text file, one
shift per line. The user can open, read and hand-edit it.

TRADEOFFS:
- Every save truncates and rewrites the whole file. There is no atomic
  rename and no backup, so a crash mid-write can leave a truncated or
  empty file.
- No locking. Two processes writing the same file is undefined
  (last writer wins at best).
"""

from pathlib import Path
from typing import Sequence, Union

from shift_tracker.audit import get_logger
from shift_tracker.models.shift import Shift
from shift_tracker.services.storage.interface import (
    ShiftStorageInterface,
    StorageIOError,
)


logger = get_logger(__name__)


class FileShiftStorage(ShiftStorageInterface):
    """Stores shifts in a line-oriented text file."""

    def __init__(self, path: Union[str, Path]):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Shift]:
        """Read every non-blank line and decode it. A missing file is an empty store."""
        if not self._path.exists():
            logger.debug("shift_store_missing", path=str(self._path))
            return []

        shifts = []
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                for line_number, line in enumerate(f, start=1):
                    if not line.strip():
                        continue
                    shifts.append(Shift.from_line(line.rstrip("\r\n"), line_number))
        except (OSError, UnicodeDecodeError) as e:
            raise StorageIOError(f"Cannot open file for read: {self._path}") from e

        logger.debug("shifts_loaded", path=str(self._path), count=len(shifts))
        return shifts

    def save(self, shifts: Sequence[Shift]) -> None:
        """Truncate the file and write every shift, one per line."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "w", encoding="utf-8", newline="\n") as f:
                for shift in shifts:
                    f.write(shift.to_line() + "\n")
        except OSError as e:
            raise StorageIOError(f"Cannot open file for write: {self._path}") from e

        logger.debug("shifts_saved", path=str(self._path), count=len(shifts))
