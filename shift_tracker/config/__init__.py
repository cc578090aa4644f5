"""Configuration package."""

from shift_tracker.config.settings import (
    DEFAULT_DATA_FILE,
    TrackerSettings,
    get_settings,
)

__all__ = [
    "DEFAULT_DATA_FILE",
    "TrackerSettings",
    "get_settings",
]
