"""Excel report writer for activities, timespan totals and goal progress."""

from __future__ import annotations

import logging
from datetime import date
from os import PathLike
from pathlib import Path
from typing import Any, Iterable, Sequence

import pandas as pd
from openpyxl.styles import Border, Font, PatternFill, Side
from openpyxl.worksheet.worksheet import Worksheet

from .activity_aggregation import summarize
from .goals import GoalProgress
from .models import Activity
from .utils import format_duration

ACTIVITIES_SHEET = "Activities"
SUMMARY_SHEET = "Summary"
GOALS_SHEET = "Goals"
EXCEL_DATETIME_FORMAT = "yyyy-mm-dd hh:mm:ss"

# Variant fields as they appear in the activities sheet.
_VARIANT_COLUMNS = {
    "style": "Style",
    "laps": "Laps",
    "average_lap_time": "Avg Lap Time (s)",
    "elevation": "Elevation (m)",
    "steps": "Steps",
    "average_pace": "Avg Pace (s/km)",
    "average_speed": "Avg Speed (km/h)",
}

HEADER_FONT = Font(bold=True)
HEADER_FILL = PatternFill(patternType="solid", fgColor="FFFF40FF")
HEADER_BORDER = Border(
    left=Side(style="thin", color="000000"),
    right=Side(style="thin", color="000000"),
    top=Side(style="thin", color="000000"),
    bottom=Side(style="thin", color="000000"),
)

LOGGER = logging.getLogger(__name__)

PathInput = str | Path | PathLike[str]

__all__ = ["activity_rows", "goal_rows", "write_activity_report"]


def _coerce_path(pathlike: PathInput) -> str:
    return str(Path(pathlike))


def _autosize(ws: Worksheet) -> None:
    from .config import (
        EXCEL_AUTOSIZE_COLUMNS,
        EXCEL_AUTOSIZE_MAX_WIDTH,
        EXCEL_AUTOSIZE_MIN_WIDTH,
        EXCEL_AUTOSIZE_PADDING,
        EXCEL_AUTOSIZE_MAX_ROWS,
    )

    if not EXCEL_AUTOSIZE_COLUMNS or ws.max_row > EXCEL_AUTOSIZE_MAX_ROWS:
        return
    for col_cells in ws.columns:
        col_letter = getattr(col_cells[0], "column_letter", None)
        if not col_letter:
            continue
        max_len = max(
            (len(str(cell.value)) for cell in col_cells if cell.value is not None),
            default=0,
        )
        ws.column_dimensions[col_letter].width = min(
            EXCEL_AUTOSIZE_MAX_WIDTH,
            max(EXCEL_AUTOSIZE_MIN_WIDTH, max_len + EXCEL_AUTOSIZE_PADDING),
        )


def _style_header_row(ws: Worksheet, max_col: int) -> None:
    for col_idx in range(1, max_col + 1):
        cell = ws.cell(row=1, column=col_idx)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.border = HEADER_BORDER


def activity_rows(activities: Iterable[Activity]) -> list[dict[str, Any]]:
    """Return report rows, most recent activity first."""

    # sorted() is stable, so ties keep list order like ActivityList.sort().
    ordered = sorted(activities, key=lambda act: act.start_datetime, reverse=True)
    rows: list[dict[str, Any]] = []
    for act in ordered:
        row: dict[str, Any] = {
            "Type": act.activity_type.value,
            "Caption": act.caption,
            "Start": act.start_datetime,
            "Moving Time (h:mm:ss)": format_duration(act.moving_time_seconds),
            "Distance (m)": act.distance,
            "Calories (kcal)": act.calories,
        }
        data = act.to_dict()
        for key, label in _VARIANT_COLUMNS.items():
            if key in data:
                row[label] = data[key]
        rows.append(row)
    return rows


def goal_rows(progress: Sequence[GoalProgress]) -> list[dict[str, Any]]:
    return [
        {
            "Type": p.goal.activity_type.value,
            "Goal": p.goal.goal_type.value,
            "Timespan": p.goal.timespan.value,
            "Target": p.goal.target,
            "Current": p.value,
            "Progress (%)": round(p.ratio * 100, 1),
            "Achieved": p.achieved,
        }
        for p in progress
    ]


def _write_sheet(
    writer: pd.ExcelWriter,
    sheet_name: str,
    rows: list[dict[str, Any]],
    columns: list[str] | None = None,
) -> None:
    df = pd.DataFrame(rows)
    if columns and not df.empty:
        ordered = [c for c in columns if c in df.columns]
        remaining = [c for c in df.columns if c not in ordered]
        df = df[ordered + remaining]
    if df.empty:
        df = pd.DataFrame({"Message": ["No data to display."]})
    df.to_excel(writer, sheet_name=sheet_name, index=False)
    ws = writer.sheets[sheet_name]
    _style_header_row(ws, len(df.columns))
    _autosize(ws)
    LOGGER.info("Wrote sheet %s rows=%d", sheet_name, len(rows))


def write_activity_report(
    filepath: PathInput,
    activities: Iterable[Activity],
    today: date,
    goal_progress: Sequence[GoalProgress] | None = None,
) -> None:
    """Write activities, per-timespan totals and optional goal progress."""

    from .config import ACTIVITY_COLUMN_ORDER

    acts = list(activities)
    filepath = _coerce_path(filepath)
    with pd.ExcelWriter(
        filepath, engine="openpyxl", datetime_format=EXCEL_DATETIME_FORMAT
    ) as writer:
        _write_sheet(writer, ACTIVITIES_SHEET, activity_rows(acts), ACTIVITY_COLUMN_ORDER)
        _write_sheet(writer, SUMMARY_SHEET, summarize(acts, today))
        if goal_progress is not None:
            _write_sheet(writer, GOALS_SHEET, goal_rows(goal_progress))
