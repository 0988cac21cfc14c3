# SPDX-License-Identifier: MIT

import re
from typing import Literal, Optional

import pendulum

WeekStart = Literal[0, 1]

ISO_DATE_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")

MONTH_NAMES = [
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
]

# Indexed by native day of week (0 = Sunday)
WEEKDAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


class InvalidFormatError(ValueError):
    """Raised when a date or color string cannot be parsed."""

    pass


def today() -> pendulum.Date:
    return pendulum.today("local").date()


def calendar_date(year: int, month: int, day: int) -> pendulum.Date:
    return pendulum.date(year, month, day)


def calendar_date_from_str(text: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string into a calendar date.

    Surrounding whitespace is ignored. Any other shape, or a date that does
    not exist on the calendar (e.g. 2023-02-29), raises InvalidFormatError.
    """
    match = ISO_DATE_PATTERN.match(text.strip())
    if match is None:
        raise InvalidFormatError(f"Not a YYYY-MM-DD date: {text!r}")

    year, month, day = (int(group) for group in match.groups())
    try:
        return pendulum.date(year, month, day)
    except ValueError as e:
        raise InvalidFormatError(f"Not a calendar date: {text!r}") from e


def calendar_date_from_str_optional(
    text: Optional[str],
) -> Optional[pendulum.Date]:
    if text is None or text.strip() == "":
        return None
    try:
        return calendar_date_from_str(text)
    except InvalidFormatError:
        return None


def calendar_date_to_str(date: pendulum.Date) -> str:
    return f"{date.year:04d}-{date.month:02d}-{date.day:02d}"


def calendar_date_to_display_str(date: pendulum.Date) -> str:
    """Format a date as 'Mon, Jan 15, 2024' using fixed English names."""
    weekday = WEEKDAY_NAMES[native_day_of_week(date)]
    return f"{weekday}, {MONTH_NAMES[date.month - 1]} {date.day}, {date.year}"


def add_days(date: pendulum.Date, days: int) -> pendulum.Date:
    return date.add(days=days)


def days_between(start: pendulum.Date, date: pendulum.Date) -> int:
    """Signed number of days from start to date."""
    return date.toordinal() - start.toordinal()


def native_day_of_week(date: pendulum.Date) -> int:
    """Day of week with 0 = Sunday through 6 = Saturday."""
    return date.isoweekday() % 7


def day_of_week_index(date: pendulum.Date, week_start: WeekStart) -> int:
    """Position of the date within its week, 0 being the configured first day.

    With week_start=1 (Monday) Sunday maps to 6.
    """
    return (native_day_of_week(date) - week_start + 7) % 7


def generate_date_range(
    start: pendulum.Date, end: pendulum.Date
) -> list[pendulum.Date]:
    """Every date from start to end, inclusive. Empty if start is after end."""
    return [add_days(start, offset) for offset in range(days_between(start, end) + 1)]


def get_weekday_labels(week_start: WeekStart) -> list[str]:
    if week_start == 1:
        return WEEKDAY_NAMES[1:] + WEEKDAY_NAMES[:1]
    return list(WEEKDAY_NAMES)
