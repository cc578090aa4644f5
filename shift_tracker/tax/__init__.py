"""Tax estimation package."""

from shift_tracker.tax.estimator import (
    BASIC_RATE,
    DEFAULT_PERIODS_PER_YEAR,
    HIGHER_BAND_THRESHOLD,
    HIGHER_RATE,
    PERSONAL_ALLOWANCE,
    estimate_period_tax,
    estimate_tax_yearly,
)

__all__ = [
    "BASIC_RATE",
    "DEFAULT_PERIODS_PER_YEAR",
    "HIGHER_BAND_THRESHOLD",
    "HIGHER_RATE",
    "PERSONAL_ALLOWANCE",
    "estimate_period_tax",
    "estimate_tax_yearly",
]
