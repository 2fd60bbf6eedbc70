"""Liturgical season classification."""

from __future__ import annotations

from datetime import date
from itertools import groupby

from kalendar import feasts
from kalendar.advent import advent1
from kalendar.domain import LiturgicalYear, Season
from kalendar.paschal import pascal_moon
from kalendar.primitives import as_date, year_days


def liturgical_year(year: int) -> LiturgicalYear:
    easter = feasts.easter(year)
    return LiturgicalYear(
        year=year,
        epiphany=feasts.epiphany(year),
        ash_wednesday=easter - feasts.ASH_WEDNESDAY_OFFSET,
        pascal_moon=pascal_moon(year),
        easter=easter,
        memorial_day=feasts.memorial_day(year),
        pentecost=easter + feasts.PENTECOST_OFFSET,
        advent1=advent1(year),
        christmas=feasts.christmas(year),
    )


def classify(current: date, bounds: LiturgicalYear) -> Season:
    if current < bounds.epiphany:
        return Season.CHRISTMAS
    if current < bounds.ash_wednesday:
        return Season.EPIPHANY
    if current < bounds.easter:
        return Season.LENT
    # Pentecost Sunday still belongs to Eastertide.
    if current <= bounds.pentecost:
        return Season.EASTER
    if current < bounds.advent1:
        return Season.AFTER_PENTECOST
    if current < bounds.christmas:
        return Season.ADVENT
    return Season.CHRISTMAS


def lit_season(day: date) -> Season:
    current = as_date(day)
    return classify(current, liturgical_year(current.year))


def season_spans(year: int) -> list[tuple[Season, date, date]]:
    """Return the contiguous (season, first day, last day) intervals of ``year``."""
    bounds = liturgical_year(year)
    spans: list[tuple[Season, date, date]] = []
    for season, days in groupby(year_days(year), key=lambda day: classify(day, bounds)):
        members = list(days)
        spans.append((season, members[0], members[-1]))
    return spans
