"""
Date key helpers.

Shift dates are kept as YYYY-MM-DD strings. Sorting and month grouping
work on the raw string, which is only correct because the canonical
form is fixed-width and zero-padded.
"""

import re

SECONDS_PER_DAY = 86400

# Fields a too-short or unreadable date falls back to (year 1900, January, day 0)
_FALLBACK_YEAR = 1900
_FALLBACK_MONTH = 1
_FALLBACK_DAY = 0

_LEADING_INT = re.compile(r"[ \t]*([+-]?[0-9]+)")


def _read_int(text: str, fallback: int) -> int:
    """Leading ASCII integer of text (optional whitespace and sign), else the fallback."""
    match = _LEADING_INT.match(text)
    if match is None:
        return fallback
    return int(match.group(1))


def _days_from_civil(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for a proleptic Gregorian date, normalising month and day overflow."""
    year += (month - 1) // 12
    month = (month - 1) % 12 + 1

    # Shift the year to start in March so the leap day is last.
    y = year - 1 if month <= 2 else year
    era = y // 400
    yoe = y - era * 400
    mp = (month + 9) % 12
    doy = (153 * mp + 2) // 5
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146097 + doe - 719468 + (day - 1)


def date_key_to_timestamp(value: str) -> int:
    """
    Seconds since the epoch for UTC midnight of a YYYY-MM-DD date.

    Malformed dates never raise. A string shorter than ten characters,
    or an unreadable year/month/day slice, falls back to zero-filled
    fields, which lands on 1899-12-31.
    """
    year, month, day = _FALLBACK_YEAR, _FALLBACK_MONTH, _FALLBACK_DAY
    if len(value) >= 10:
        year = _read_int(value[0:4], _FALLBACK_YEAR)
        month = _read_int(value[5:7], _FALLBACK_MONTH)
        day = _read_int(value[8:10], _FALLBACK_DAY)
    return _days_from_civil(year, month, day) * SECONDS_PER_DAY


def month_key(value: str) -> str:
    """Year-month grouping key (YYYY-MM) of a date string."""
    return value[:7]
