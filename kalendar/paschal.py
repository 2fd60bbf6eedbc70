"""Paschal full moon lookup over the 19-year Metonic cycle."""

from __future__ import annotations

from datetime import date

from kalendar.primitives import as_date

# Ecclesiastical full moon (month, day) for each year of the cycle.
PASCHAL_MOONS: dict[int, tuple[int, int]] = {
    1: (4, 14),
    2: (4, 3),
    3: (3, 23),
    4: (4, 11),
    5: (3, 31),
    6: (4, 18),
    7: (4, 8),
    8: (3, 28),
    9: (4, 16),
    10: (4, 5),
    11: (3, 25),
    12: (4, 13),
    13: (4, 2),
    14: (3, 22),
    15: (4, 10),
    16: (3, 30),
    17: (4, 17),
    18: (4, 7),
    19: (3, 27),
}


def metonic_cycle(year: int) -> int:
    """Position of ``year`` in the Metonic cycle, from 1 to 19."""
    return (year % 19) + 1


def pascal_moon(year: int) -> date:
    month, day = PASCHAL_MOONS[metonic_cycle(year)]
    return date(year, month, day)


def is_pascal_moon(day: date) -> bool:
    current = as_date(day)
    return current == pascal_moon(current.year)
