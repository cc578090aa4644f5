"""Shared fixtures for Shift Tracker tests."""

import logging
from datetime import datetime, timezone

import pytest

from shift_tracker.config import get_settings
from shift_tracker.models.shift import Shift


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Run every test from an empty directory with no SHIFT_TRACKER_* overrides."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SHIFT_TRACKER_DATA_FILE", raising=False)
    monkeypatch.delenv("SHIFT_TRACKER_LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    root = logging.getLogger()
    level = root.level
    yield
    get_settings.cache_clear()
    root.setLevel(level)
    for handler in list(root.handlers):
        if handler.get_name() == "shift_tracker_stderr":
            root.removeHandler(handler)


@pytest.fixture
def store_path(tmp_path):
    """Location of a shift store that does not exist yet."""
    return tmp_path / "data" / "shifts.csv"


@pytest.fixture
def fixed_clock():
    """Build a clock that always returns the given UTC time."""
    def make(*args):
        now = datetime(*args, tzinfo=timezone.utc)
        return lambda: now
    return make


@pytest.fixture
def sample_shifts():
    return [
        Shift(date="2025-03-01", hours=4, hourly_rate=12.5, note="Saturday"),
        Shift(date="2025-01-10", hours=8, hourly_rate=11.0, note="Inventory"),
        Shift(date="2025-01-10", hours=2, hourly_rate=11.0),
    ]
