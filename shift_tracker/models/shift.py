"""
Shift Record Model

A Shift is one recorded unit of work: the date it happened, how many hours
were worked, the hourly rate and an optional free-text note.

DESIGN DECISION: Pay is never stored. It is always recomputed from
hours and rate, so the two can never drift apart.

PERSISTED FORMAT:
    date,hours,rate,note

One shift per line, comma delimited, no header, no quoting and no escaping.
A note that itself contains a comma will NOT survive a round trip:
everything after the fourth field is dropped on read. This is a known
limitation of the format, not something we silently repair.
"""

import math

from pydantic import BaseModel, ConfigDict, Field

from shift_tracker.models.result import ErrorKind, OperationResult


DELIMITER = ","

# date, hours, rate are mandatory; note is optional
MIN_FIELDS = 3


class FormatError(ValueError):
    """A persisted shift line could not be decoded."""

    def __init__(self, message: str, line_number: int):
        super().__init__(message)
        self.line_number = line_number


def format_number(value: float) -> str:
    """
    Render a number the way it is written to the store.

    Whole numbers drop the fractional part (100 rather than 100.0),
    everything else uses repr() so the value parses back exactly.
    """
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class Shift(BaseModel):
    """
    One unit of worked time.

    Immutable once constructed. "Editing" a shift is not supported,
    only adding new ones.
    """
    model_config = ConfigDict(frozen=True)

    date: str = Field(
        ...,
        description="Shift date, canonical form YYYY-MM-DD"
    )
    hours: float = Field(
        ...,
        description="Hours worked"
    )
    hourly_rate: float = Field(
        ...,
        description="Pay rate per hour"
    )
    note: str = Field(
        default="",
        description="Free-text annotation"
    )

    def pay(self) -> float:
        """Pay earned for this shift (hours * hourly rate), unrounded."""
        return self.hours * self.hourly_rate

    def to_line(self) -> str:
        """
        Encode this shift as a single store line (no trailing newline).

        The note is written verbatim; delimiters inside it are not escaped.
        """
        return DELIMITER.join([
            self.date,
            format_number(self.hours),
            format_number(self.hourly_rate),
            self.note,
        ])

    @classmethod
    def from_line(cls, line: str, line_number: int) -> "Shift":
        """
        Decode one store line.

        Args:
            line: The raw line, without its line terminator
            line_number: 1-based position in the store, used in error messages

        Returns:
            The decoded Shift

        Raises:
            FormatError: If there are fewer than three fields, or hours/rate
                are not numbers
        """
        parts = line.split(DELIMITER)
        if len(parts) < MIN_FIELDS:
            raise FormatError(f"Bad CSV at line {line_number}", line_number)

        try:
            hours = float(parts[1])
            hourly_rate = float(parts[2])
        except ValueError:
            raise FormatError(f"Bad number at line {line_number}", line_number)

        return cls(
            date=parts[0],
            hours=hours,
            hourly_rate=hourly_rate,
            note=parts[3] if len(parts) > MIN_FIELDS else "",
        )

    @classmethod
    def try_decode(cls, line: str, line_number: int) -> "OperationResult[Shift]":
        """Decode a line, returning a result instead of raising."""
        try:
            return OperationResult[Shift].ok(cls.from_line(line, line_number))
        except FormatError as e:
            return OperationResult[Shift].failure(ErrorKind.FORMAT, str(e))
