"""First Sunday of Advent and the kalendar year."""

from __future__ import annotations

from datetime import date

from kalendar.feasts import christmas
from kalendar.primitives import as_date, rev_weeks, this_sunday


def advent1(year: int) -> date:
    """Return the First Sunday of Advent.

    The Fourth Sunday of Advent is the Sunday on or before Christmas Day;
    Advent begins three weeks earlier.
    """
    return rev_weeks(this_sunday(christmas(year)), 3)


def kalendar_year(day: date) -> int:
    """Return the liturgical year ``day`` belongs to.

    The kalendar year opens after Advent Sunday, so Advent Sunday itself
    still counts toward the previous year.
    """
    current = as_date(day)
    if current > advent1(current.year):
        return current.year
    return current.year - 1
