"""Twelve-month text calendars for a year with a given first weekday."""

from __future__ import annotations

import argparse
import sys

MONTHS_IN_YEAR = 12
DAYS_IN_WEEK = 7

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
_WEEKDAYS = "  S  M  T  W  T  F  S"
_RULE = "---------------------"
_CELL = 3


def is_leap_year(year: int) -> bool:
    """Return whether ``year`` is a Gregorian leap year."""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def _check_month(month: int) -> None:
    if not 1 <= month <= MONTHS_IN_YEAR:
        raise ValueError(f"month must be from 1 to {MONTHS_IN_YEAR}, got {month}")


def _check_day(day: int) -> None:
    if not 0 <= day < DAYS_IN_WEEK:
        raise ValueError(f"day of week must be from 0 to {DAYS_IN_WEEK - 1}, got {day}")


def days_in_month(month: int, leap: bool) -> int:
    """Return the number of days in ``month`` (1-12)."""
    _check_month(month)
    if month == 2 and leap:
        return 29
    return _DAYS[month - 1]


def month_header(month: int) -> str:
    """Return the month name, weekday initials and rule that open a month."""
    _check_month(month)
    return f"{MONTH_NAMES[month - 1]:>13}\n\n{_WEEKDAYS}\n{_RULE}\n"


def format_month(year: int, month: int, start_day: int) -> tuple[str, int]:
    """Return the text of one month and the weekday the next month starts on.

    Weekdays are numbered 0 for Sunday through 6 for Saturday.
    """
    _check_day(start_day)
    days = days_in_month(month, is_leap_year(year))
    parts = [month_header(month), " " * (_CELL * start_day)]
    weekday = start_day
    for date in range(1, days + 1):
        parts.append(f"{date:{_CELL}d}")
        weekday += 1
        if weekday == DAYS_IN_WEEK:
            weekday = 0
            if date != days:
                parts.append("\n")
    parts.append("\n\n")
    return "".join(parts), weekday


def format_calendar(year: int, start_day: int) -> str:
    """Return the full calendar for ``year`` whose January 1 falls on ``start_day``."""
    parts = [f"{year:11d}\n\n"]
    weekday = start_day
    for month in range(1, MONTHS_IN_YEAR + 1):
        text, weekday = format_month(year, month, weekday)
        parts.append(text)
    return "".join(parts)


def _ask_int(prompt: str) -> int:
    return int(input(prompt).strip())


def main(argv: list[str] | None = None) -> int:
    """Print a calendar, asking for the year and first weekday when not given."""
    parser = argparse.ArgumentParser(description="Print a twelve-month calendar.")
    parser.add_argument("year", nargs="?", type=int, help="calendar year")
    parser.add_argument(
        "start_day", nargs="?", type=int, help="weekday of January 1 (0 = Sunday)"
    )
    args = parser.parse_args(argv)

    try:
        year = args.year
        if year is None:
            year = _ask_int("What year do you want a calendar for? ")
        start_day = args.start_day
        if start_day is None:
            print("What day of the week does January 1 fall on?")
            start_day = _ask_int(
                "(Enter 0 for Sunday, 1 for Monday, 6 for Saturday, etc.): "
            )
        calendar_text = format_calendar(year, start_day)
    except EOFError:
        print()
        return 1
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    print(calendar_text, end="")
    return 0