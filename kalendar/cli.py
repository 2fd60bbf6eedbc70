"""CLI for the liturgical kalendar."""

from __future__ import annotations

import argparse
from datetime import date

import pandas as pd

from kalendar.export_excel import export_year_excel
from kalendar.report import (
    KalendarInputError,
    describe_day,
    feast_rows,
    parse_request,
    season_rows,
    year_rows,
)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Liturgical kalendar CLI")
    parser.add_argument("--date", help="Date in YYYY-MM-DD format (default: today)")
    parser.add_argument("--year", help="Print the feasts and seasons of this year")
    parser.add_argument(
        "--print-days",
        action="store_true",
        help="With --year, print every day of the year",
    )
    parser.add_argument("--out", help="With --year, path to output Excel file")
    return parser.parse_args(argv)


def _render_table(rows: list[dict[str, object]]) -> str:
    if not rows:
        return "(no rows)"
    return pd.DataFrame(rows).to_string(index=False)


def _parse_request_or_exit(args: argparse.Namespace) -> tuple[date | None, int | None]:
    try:
        return parse_request(args.date, args.year)
    except KalendarInputError as exc:
        print("Invalid input:")
        for issue in exc.issues:
            print(f"- {issue['field']} {issue['value']!r}: {issue['message']}")
        raise SystemExit(1) from exc


def _format_day(day: date) -> str:
    info = describe_day(day)
    lines = [
        f"{info.date:%A}, {info.date:%B} {info.ordinal}, {info.date.year}",
        f"Season: {info.season.value}",
        f"Kalendar year: {info.kalendar_year}",
    ]
    if info.holidays:
        lines.append(f"Holidays: {', '.join(sorted(info.holidays))}")
    if info.is_pascal_moon:
        lines.append("Paschal full moon")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    day, year = _parse_request_or_exit(args)
    if year is None:
        if args.print_days or args.out:
            raise SystemExit("ERROR: --print-days and --out require --year")
        print(_format_day(day or date.today()))
        return
    if day is not None:
        print(_format_day(day))
    print(_render_table(feast_rows(year)))
    print()
    print(_render_table(season_rows(year)))
    if args.print_days:
        print()
        print(_render_table(year_rows(year)))
    if args.out:
        output_path = export_year_excel(args.out, year)
        print(f"OK: wrote {output_path}")


if __name__ == "__main__":
    main()
