"""Excel export helpers."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
from openpyxl.utils import get_column_letter

from kalendar.domain import Settings
from kalendar.report import feast_rows, season_rows, year_rows

SHEET_NAMES = ("days", "feasts", "seasons")


def _auto_fit_columns(worksheet) -> None:
    for column_cells in worksheet.columns:
        values = [str(cell.value) if cell.value is not None else "" for cell in column_cells]
        max_length = max((len(value) for value in values), default=0)
        column_letter = get_column_letter(column_cells[0].column)
        worksheet.column_dimensions[column_letter].width = min(max_length + 2, 60)


def _apply_sheet_formatting(worksheet) -> None:
    worksheet.freeze_panes = "A2"
    worksheet.auto_filter.ref = worksheet.dimensions
    _auto_fit_columns(worksheet)


def export_year_excel(
    path: str | Path,
    year: int,
    settings: Settings | None = None,
) -> Path:
    output_path = Path(path)
    frames = {
        "days": pd.DataFrame(year_rows(year, settings)),
        "feasts": pd.DataFrame(feast_rows(year)),
        "seasons": pd.DataFrame(season_rows(year)),
    }

    with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
        for sheet_name in SHEET_NAMES:
            frames[sheet_name].to_excel(writer, sheet_name=sheet_name, index=False)
            _apply_sheet_formatting(writer.sheets[sheet_name])
    return output_path
