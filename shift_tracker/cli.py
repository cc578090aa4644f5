"""
Command-line interface for Shift Tracker.

The CLI is a thin boundary: it parses arguments, builds a ShiftTracker
over the configured file store, calls one tracker operation and prints
the result.

Exit codes:
    0  success (including --help)
    1  malformed invocation (unknown option, wrong arity, bad number)
    2  core failure (unreadable/unwritable store, malformed stored record)
"""

import argparse
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from shift_tracker.audit import configure_logging, get_logger
from shift_tracker.config import get_settings
from shift_tracker.models.shift import FormatError, Shift, format_number
from shift_tracker.services.storage import FileShiftStorage, StorageError
from shift_tracker.tracker import DEFAULT_HIGH_PAY_THRESHOLD, ShiftTracker


logger = get_logger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_FAILURE = 2


class ArgumentError(Exception):
    """The command line could not be understood."""
    pass


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing usage and exiting."""

    def error(self, message):
        raise ArgumentError(message)


def build_parser(data_file: str) -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="shift-tracker",
        description="Shift & pay tracker: record work shifts and report on pay.",
        epilog=f"Files:\n  {data_file}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    commands = parser.add_mutually_exclusive_group()
    commands.add_argument(
        "--help", "-h", action="store_true",
        help="show this message and exit",
    )
    commands.add_argument(
        "--add", nargs=argparse.REMAINDER, metavar="FIELD",
        help="add a shift: DATE HOURS RATE [NOTE], e.g. 2025-10-01 5.5 12.5 \"Lunch shift\"; must come last",
    )
    commands.add_argument(
        "--list", action="store_true",
        help="list every shift, oldest first",
    )
    commands.add_argument(
        "--recent", metavar="DAYS",
        help="list shifts from the last DAYS days and their total pay",
    )
    commands.add_argument(
        "--monthly", action="store_true",
        help="total pay per month",
    )
    commands.add_argument(
        "--summary", action="store_true",
        help="shift count, gross pay, rough tax estimate and high-pay shifts",
    )
    return parser


def format_amount(value: float) -> str:
    """Money figure for display: rounded to pence, trailing zeros dropped."""
    return format_number(round(value, 2))


def _parse_float(text: str, name: str) -> float:
    try:
        return float(text)
    except ValueError:
        raise ArgumentError(f"{name} must be a number, got {text!r}")


def _parse_days(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ArgumentError(f"DAYS must be a whole number, got {text!r}")


def _shift_from_fields(fields: Sequence[str]) -> Shift:
    if not 3 <= len(fields) <= 4:
        raise ArgumentError("--add expects DATE HOURS RATE [NOTE]")
    return Shift(
        date=fields[0],
        hours=_parse_float(fields[1], "HOURS"),
        hourly_rate=_parse_float(fields[2], "RATE"),
        note=fields[3] if len(fields) == 4 else "",
    )


def _run(
    tracker: ShiftTracker,
    args: argparse.Namespace,
    new_shift: Optional[Shift],
    days: Optional[int],
) -> None:
    if new_shift is not None:
        tracker.add(new_shift)
        print(f"Added: {new_shift.to_line()}")

    elif args.list:
        for shift in tracker.list_all_sorted():
            print(shift.to_line())

    elif days is not None:
        recent = tracker.filter_recent_days(days)
        for shift in recent:
            print(shift.to_line())
        print(f"Total pay in last {days} days: {format_amount(tracker.total_pay(recent))}")

    elif args.monthly:
        for month, total in tracker.monthly_totals().items():
            print(f"{month},{format_amount(total)}")

    elif args.summary:
        summary = tracker.summary(high_pay_threshold=DEFAULT_HIGH_PAY_THRESHOLD)
        print(f"Shifts: {summary.shift_count}")
        print(f"Gross (pretax): {format_amount(summary.gross_total)}")
        print(f"Estimated tax (yearly scaled): {format_amount(summary.estimated_tax)}")
        print(f"Shifts paying >= {format_number(summary.high_pay_threshold)}: {summary.high_pay_count}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    argv = list(sys.argv[1:] if argv is None else argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return EXIT_FAILURE
    configure_logging(settings.log_level)

    parser = build_parser(str(settings.data_file))
    if not argv:
        parser.print_help()
        return EXIT_OK

    try:
        args = parser.parse_args(argv)
        if args.help:
            parser.print_help()
            return EXIT_OK
        new_shift = _shift_from_fields(args.add) if args.add is not None else None
        days = _parse_days(args.recent) if args.recent is not None else None
        if new_shift is None and days is None and not (args.list or args.monthly or args.summary):
            raise ArgumentError("no command given")
    except ArgumentError as e:
        print(f"Error: {e}. Use --help.", file=sys.stderr)
        return EXIT_USAGE

    try:
        tracker = ShiftTracker(FileShiftStorage(settings.data_file))
        _run(tracker, args, new_shift, days)
    except (FormatError, StorageError) as e:
        logger.info("cli_failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_OK
