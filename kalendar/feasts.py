"""Movable and fixed feasts."""

from __future__ import annotations

from datetime import date, timedelta

from kalendar.domain import Holiday, Settings
from kalendar.paschal import pascal_moon
from kalendar.primitives import as_date, next_sunday

ASH_WEDNESDAY_OFFSET = timedelta(days=46)  # before Easter
PENTECOST_OFFSET = timedelta(days=49)  # after Easter


def easter(year: int) -> date:
    """Return Easter Sunday: the first Sunday strictly after the Paschal moon."""
    return next_sunday(pascal_moon(year))


def ash_wednesday(year: int) -> date:
    return easter(year) - ASH_WEDNESDAY_OFFSET


def pentecost(year: int) -> date:
    return easter(year) + PENTECOST_OFFSET


def new_year(year: int) -> date:
    return date(year, 1, 1)


def epiphany(year: int) -> date:
    return date(year, 1, 6)


def valentines_day(year: int) -> date:
    return date(year, 2, 14)


def christmas(year: int) -> date:
    return date(year, 12, 25)


def memorial_day(year: int) -> date:
    """Return the last Monday of May."""
    end_of_may = date(year, 5, 31)
    return end_of_may - timedelta(days=end_of_may.weekday())


HOLIDAY_RESOLVERS = {
    Holiday.NEW_YEAR: new_year,
    Holiday.VALENTINES_DAY: valentines_day,
    Holiday.MEMORIAL_DAY: memorial_day,
    Holiday.CHRISTMAS_DAY: christmas,
}


def holidays_on(day: date, settings: Settings | None = None) -> set[str]:
    """Return the names of the holidays falling on ``day``.

    The four built-in holidays always apply; ``settings.fixed_holidays`` only
    adds further (month, day) observances on top of them.
    """
    if settings is None:
        settings = Settings()
    current = as_date(day)
    holidays = {
        holiday.value
        for holiday, resolver in HOLIDAY_RESOLVERS.items()
        if resolver(current.year) == current
    }
    for name, month_day in settings.fixed_holidays.items():
        if (current.month, current.day) == month_day:
            holidays.add(name)
    return holidays
