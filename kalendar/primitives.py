"""Calendar primitives shared by the resolvers."""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Any


def as_date(value: Any) -> date:
    """Return ``value`` as a plain calendar date.

    Datetimes are truncated to their date so that comparisons never see a
    time-of-day component. Strings must be ISO ``YYYY-MM-DD``.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return datetime.strptime(text, "%Y-%m-%d").date()
        except ValueError as exc:
            raise ValueError(f"Invalid date (YYYY-MM-DD): {value!r}") from exc
    raise ValueError(f"Unsupported date value: {value!r}")


def adv_days(day: date, days: int) -> date:
    """Return ``day`` moved by ``days``; leaving the 1..9999 range is a ValueError."""
    current = as_date(day)
    try:
        return current + timedelta(days=days)
    except OverflowError as exc:
        raise ValueError(f"Date out of range: {current} {days:+d} days") from exc


def rev_days(day: date, days: int) -> date:
    return adv_days(day, -days)


def adv_weeks(day: date, weeks: int) -> date:
    return adv_days(day, 7 * weeks)


def rev_weeks(day: date, weeks: int) -> date:
    return rev_days(day, 7 * weeks)


def sunday_index(day: date) -> int:
    """Weekday numbered from Sunday (0) to Saturday (6)."""
    return (as_date(day).weekday() + 1) % 7


def this_sunday(day: date) -> date:
    """Return the Sunday on or before ``day``."""
    return rev_days(day, sunday_index(day))


def next_sunday(day: date) -> date:
    """Return the first Sunday strictly after ``day``."""
    return adv_days(day, 7 - sunday_index(day))


def prev_sunday(day: date) -> date:
    """Return the last Sunday strictly before ``day``."""
    weekday = sunday_index(day)
    if weekday == 0:
        return rev_weeks(day, 1)
    return rev_days(day, weekday)


def end_of_month(day: date) -> int:
    current = as_date(day)
    return calendar.monthrange(current.year, current.month)[1]


def date_diff(first: Any, second: Any) -> int:
    """Number of days between two dates, ignoring order and time of day."""
    return abs((as_date(second) - as_date(first)).days)


def ordinal(number: int) -> str:
    if 10 <= number % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"


def month_days(ym: str) -> list[date]:
    year_str, month_str = ym.split("-", 1)
    first = date(int(year_str), int(month_str), 1)
    return [first.replace(day=number) for number in range(1, end_of_month(first) + 1)]


def year_days(year: int) -> list[date]:
    return [day for month in range(1, 13) for day in month_days(f"{year:04d}-{month:02d}")]
