"""Tests for date key helpers."""

from datetime import datetime, timezone

from shift_tracker.utils import date_key_to_timestamp, month_key


def _utc_midnight(year, month, day):
    return int(datetime(year, month, day, tzinfo=timezone.utc).timestamp())


class TestDateKeyToTimestamp:
    """Tests for YYYY-MM-DD to UTC midnight conversion."""

    def test_epoch(self):
        assert date_key_to_timestamp("1970-01-01") == 0

    def test_canonical_dates(self):
        """Test ordinary and leap-day dates."""
        assert date_key_to_timestamp("2025-01-10") == _utc_midnight(2025, 1, 10)
        assert date_key_to_timestamp("2024-02-29") == _utc_midnight(2024, 2, 29)
        assert date_key_to_timestamp("1999-12-31") == _utc_midnight(1999, 12, 31)

    def test_trailing_characters_ignored(self):
        assert date_key_to_timestamp("2025-01-10T09:30") == _utc_midnight(2025, 1, 10)

    def test_short_date_collapses(self):
        """Test that a too-short date falls back to zero-filled fields."""
        assert date_key_to_timestamp("2025-1-1") == _utc_midnight(1899, 12, 31)
        assert date_key_to_timestamp("") == _utc_midnight(1899, 12, 31)

    def test_unreadable_fields_collapse(self):
        assert date_key_to_timestamp("yyyy-mm-dd") == _utc_midnight(1899, 12, 31)

    def test_only_leading_ascii_digits_are_read(self):
        """Test that a slice is read up to its first non-digit, like stoi."""
        assert date_key_to_timestamp("1_23-01-01") == _utc_midnight(1, 1, 1)
        assert date_key_to_timestamp("2025-0\u0663-10") == _utc_midnight(2024, 12, 10)
        assert date_key_to_timestamp("2025- 3-10") == _utc_midnight(2025, 3, 10)

    def test_overflow_is_normalised(self):
        """Test month and day overflow roll over like timegm."""
        assert date_key_to_timestamp("2024-13-01") == _utc_midnight(2025, 1, 1)
        assert date_key_to_timestamp("2025-03-00") == _utc_midnight(2025, 2, 28)
        assert date_key_to_timestamp("2025-00-15") == _utc_midnight(2024, 12, 15)


class TestMonthKey:

    def test_month_key(self):
        assert month_key("2025-01-10") == "2025-01"
        assert month_key("2025") == "2025"
