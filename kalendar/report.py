"""Reporting helpers."""

from __future__ import annotations

from datetime import date
from typing import Any
import warnings

from kalendar.advent import kalendar_year
from kalendar.domain import LiturgicalDay, Settings
from kalendar.feasts import holidays_on
from kalendar.paschal import is_pascal_moon
from kalendar.primitives import as_date, ordinal, year_days
from kalendar.seasons import classify, liturgical_year, season_spans

FEAST_LABELS: dict[str, str] = {
    "epiphany": "Epiphany",
    "ash_wednesday": "Ash Wednesday",
    "pascal_moon": "Paschal Full Moon",
    "easter": "Easter Day",
    "memorial_day": "Memorial Day",
    "pentecost": "Pentecost",
    "advent1": "First Sunday of Advent",
    "christmas": "Christmas Day",
}


class KalendarInputError(ValueError):
    def __init__(self, issues: list[dict[str, Any]]) -> None:
        super().__init__("Invalid kalendar request")
        self.issues = issues


def _warn_if_inexact(year: int, settings: Settings) -> None:
    if not settings.table_is_exact(year):
        warnings.warn(
            f"Paschal moon table matches the Gregorian computus only for "
            f"{settings.table_valid_from}-{settings.table_valid_until}; "
            f"dates for {year} may differ from the official Easter.",
            UserWarning,
            stacklevel=3,
        )


def describe_day(day: Any, settings: Settings | None = None) -> LiturgicalDay:
    if settings is None:
        settings = Settings()
    current = as_date(day)
    _warn_if_inexact(current.year, settings)
    return LiturgicalDay(
        date=current,
        season=classify(current, liturgical_year(current.year)),
        kalendar_year=kalendar_year(current),
        holidays=frozenset(holidays_on(current, settings)),
        is_pascal_moon=is_pascal_moon(current),
        ordinal=ordinal(current.day),
    )


def year_rows(year: int, settings: Settings | None = None) -> list[dict[str, object]]:
    if settings is None:
        settings = Settings()
    _warn_if_inexact(year, settings)
    bounds = liturgical_year(year)
    rows: list[dict[str, object]] = []
    for day in year_days(year):
        rows.append(
            {
                "date": day,
                "weekday": day.strftime("%A"),
                "season": classify(day, bounds).value,
                "kalendar_year": kalendar_year(day),
                "holidays": ", ".join(sorted(holidays_on(day, settings))),
                "pascal_moon": day == bounds.pascal_moon,
            }
        )
    return rows


def feast_rows(year: int) -> list[dict[str, object]]:
    bounds = liturgical_year(year)
    return [
        {
            "feast": FEAST_LABELS[name],
            "date": day,
            "weekday": day.strftime("%A"),
        }
        for name, day in bounds.feasts().items()
    ]


def season_rows(year: int) -> list[dict[str, object]]:
    return [
        {
            "season": season.value,
            "start": start,
            "end": end,
            "days": (end - start).days + 1,
        }
        for season, start, end in season_spans(year)
    ]


def parse_request(
    day: str | None = None,
    year: str | int | None = None,
) -> tuple[date | None, int | None]:
    issues: list[dict[str, Any]] = []
    parsed_day: date | None = None
    parsed_year: int | None = None
    if day is not None:
        try:
            parsed_day = as_date(day)
        except ValueError as exc:
            issues.append({"field": "date", "value": day, "message": str(exc)})
    if year is not None:
        try:
            parsed_year = int(year)
        except (TypeError, ValueError):
            issues.append({"field": "year", "value": year, "message": "Year must be an integer"})
        else:
            if not date.min.year <= parsed_year <= date.max.year:
                issues.append(
                    {
                        "field": "year",
                        "value": year,
                        "message": f"Year must be between {date.min.year} and {date.max.year}",
                    }
                )
                parsed_year = None
    if issues:
        raise KalendarInputError(issues)
    return parsed_day, parsed_year
