"""Value models for the liturgical calendar."""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from kalendar.primitives import as_date


class Season(str, Enum):
    CHRISTMAS = "Christmas"
    EPIPHANY = "Epiphany"
    LENT = "Lent"
    EASTER = "Easter"
    AFTER_PENTECOST = "After Pentecost"
    ADVENT = "Advent"


class Holiday(str, Enum):
    NEW_YEAR = "New Year"
    VALENTINES_DAY = "Valentine's Day"
    CHRISTMAS_DAY = "Christmas Day"
    MEMORIAL_DAY = "Memorial Day"


# Order in which seasons follow each other through one Gregorian year.
SEASON_ORDER: tuple[Season, ...] = (
    Season.CHRISTMAS,
    Season.EPIPHANY,
    Season.LENT,
    Season.EASTER,
    Season.AFTER_PENTECOST,
    Season.ADVENT,
    Season.CHRISTMAS,
)


def _parse_month_day(value: Any) -> tuple[int, int]:
    if isinstance(value, str):
        parts = value.replace("/", "-").split("-")
        if len(parts) != 2:
            raise ValueError(f"Invalid month-day (MM-DD): {value!r}")
        value = tuple(parts)
    try:
        month, day = (int(part) for part in value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid month-day (MM-DD): {value!r}") from exc
    # 2000 is a leap year, so February 29 is accepted.
    date(2000, month, day)
    return month, day


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Observances added on top of the built-in holidays.
    fixed_holidays: dict[str, tuple[int, int]] = Field(default_factory=dict)
    table_valid_from: int = 1900
    table_valid_until: int = 2199

    @field_validator("fixed_holidays", mode="before")
    @classmethod
    def _parse_fixed_holidays(cls, value: Any) -> dict[str, tuple[int, int]]:
        if not isinstance(value, dict):
            raise ValueError("fixed_holidays must map names to month-day pairs")
        return {str(name).strip(): _parse_month_day(md) for name, md in value.items()}

    @model_validator(mode="after")
    def _validate_range(self) -> "Settings":
        if self.table_valid_from > self.table_valid_until:
            raise ValueError("table_valid_from must not be after table_valid_until")
        return self

    def table_is_exact(self, year: int) -> bool:
        return self.table_valid_from <= year <= self.table_valid_until


class LiturgicalYear(BaseModel):
    """Boundary dates of one Gregorian year."""

    model_config = ConfigDict(frozen=True)

    year: int
    epiphany: date
    ash_wednesday: date
    pascal_moon: date
    easter: date
    memorial_day: date
    pentecost: date
    advent1: date
    christmas: date

    def feasts(self) -> dict[str, date]:
        data = self.model_dump(exclude={"year"})
        return dict(sorted(data.items(), key=lambda item: item[1]))


class LiturgicalDay(BaseModel):
    model_config = ConfigDict(frozen=True)

    date: date
    season: Season
    kalendar_year: int
    holidays: frozenset[str] = frozenset()
    is_pascal_moon: bool = False
    ordinal: str

    @field_validator("date", mode="before")
    @classmethod
    def _truncate_date(cls, value: Any) -> date:
        return as_date(value)
