"""
Shift Tracker

DESIGN DECISION: The tracker is a thin stateful facade over an in-memory
list of shifts. It is loaded once, eagerly, from its storage. Every query
runs over that list; every add rewrites the whole store.

GUARANTEES:
- Queries never mutate the collection and always return new lists
- Insertion order is load order followed by add order
- Errors from storage propagate unchanged

KNOWN LIMITATIONS:
- add() is O(n) in the collection size because it saves everything
- If a save fails after add() appended in memory, the append is NOT
  rolled back; memory and storage disagree until the next successful save
"""

from collections import defaultdict
from datetime import datetime, timezone
from typing import Callable, Iterable, Optional

from shift_tracker.audit import get_logger
from shift_tracker.models.report import ShiftSummary
from shift_tracker.models.shift import Shift
from shift_tracker.services.storage import ShiftStorageInterface, StorageError
from shift_tracker.tax import DEFAULT_PERIODS_PER_YEAR, estimate_period_tax
from shift_tracker.utils import SECONDS_PER_DAY, date_key_to_timestamp, month_key


logger = get_logger(__name__)

DEFAULT_HIGH_PAY_THRESHOLD = 100.0


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ShiftTracker:
    """
    Owns the shift collection and the storage it came from.

    Args:
        storage: Storage backend; owned by the tracker for its lifetime
        clock: Returns the current time; defaults to the UTC wall clock

    Raises:
        StorageIOError, FormatError: If the initial load fails
    """

    def __init__(
        self,
        storage: ShiftStorageInterface,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._storage = storage
        self._clock = clock or _utc_now
        self._shifts: list[Shift] = storage.load()
        logger.info("tracker_loaded", count=len(self._shifts))

    def __len__(self) -> int:
        return len(self._shifts)

    @property
    def shifts(self) -> list[Shift]:
        """A copy of the collection in insertion order."""
        return list(self._shifts)

    def add(self, shift: Shift) -> None:
        """
        Append a shift and persist the full collection.

        Raises:
            StorageError: If saving fails. The shift stays in memory.
        """
        self._shifts.append(shift)
        try:
            self._storage.save(self._shifts)
        except StorageError as e:
            logger.error("shift_save_failed", date=shift.date, error=str(e))
            raise
        logger.info("shift_added", date=shift.date, pay=shift.pay(), count=len(self._shifts))

    def list_all_sorted(self) -> list[Shift]:
        """Every shift, ascending by date string. Ties keep insertion order."""
        return sorted(self._shifts, key=lambda s: s.date)

    def filter_recent_days(self, days: int) -> list[Shift]:
        """
        Shifts dated on or after now minus the given number of days.

        Each date is taken as midnight UTC. The clock is read once per call.
        Order is preserved.
        """
        now = self._clock()
        cutoff = int(now.timestamp()) - days * SECONDS_PER_DAY
        return [s for s in self._shifts if date_key_to_timestamp(s.date) >= cutoff]

    def total_pay(self, shifts: Iterable[Shift]) -> float:
        return sum((s.pay() for s in shifts), 0.0)

    def monthly_totals(self) -> dict[str, float]:
        """Pay summed per YYYY-MM month, keys in ascending order."""
        totals: dict[str, float] = defaultdict(float)
        for shift in self._shifts:
            totals[month_key(shift.date)] += shift.pay()
        return dict(sorted(totals.items()))

    def count_high_pay(self, threshold: float) -> int:
        """Number of shifts paying at least the threshold (inclusive)."""
        return sum(1 for s in self._shifts if s.pay() >= threshold)

    def summary(
        self,
        high_pay_threshold: float = DEFAULT_HIGH_PAY_THRESHOLD,
        periods_per_year: float = DEFAULT_PERIODS_PER_YEAR,
    ) -> ShiftSummary:
        """
        Headline figures over every shift.

        The tax figure treats the whole gross as one period's earnings,
        scales it to a year, estimates, and divides back.
        """
        gross = self.total_pay(self._shifts)
        return ShiftSummary(
            shift_count=len(self._shifts),
            gross_total=gross,
            estimated_tax=estimate_period_tax(gross, periods_per_year),
            high_pay_threshold=high_pay_threshold,
            high_pay_count=self.count_high_pay(high_pay_threshold),
        )
