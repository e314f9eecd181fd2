"""Tests for the Excel activity report."""

from __future__ import annotations

import pandas as pd

from fitness_log.activity_types import ActivityType
from fitness_log.excel_writer import activity_rows, write_activity_report
from fitness_log.goals import Goal, GoalList, GoalType
from fitness_log.timespan import Timespan


def test_activity_rows_most_recent_first(mixed_activities) -> None:
    rows = activity_rows(mixed_activities)
    assert rows[0]["Caption"] == "Morning Run"
    assert rows[-1]["Caption"] == "NYE Run"
    swim_row = next(r for r in rows if r["Type"] == "swim")
    assert swim_row["Laps"] == 30
    assert swim_row["Avg Lap Time (s)"] == 60
    assert swim_row["Style"] == "breaststroke"
    assert swim_row["Moving Time (h:mm:ss)"] == "0:30:00"


def test_write_report_sheets(tmp_path, mixed_activities, today, clock) -> None:
    goals = GoalList(
        items=[Goal(ActivityType.RUN, GoalType.DISTANCE, Timespan.WEEK, 10000)],
        clock=clock,
    )
    path = tmp_path / "report.xlsx"
    write_activity_report(path, mixed_activities, today, goals.progress(mixed_activities))

    sheets = pd.read_excel(path, sheet_name=None)
    assert set(sheets) == {"Activities", "Summary", "Goals"}
    activities = sheets["Activities"]
    assert list(activities.columns[:6]) == [
        "Type",
        "Caption",
        "Start",
        "Moving Time (h:mm:ss)",
        "Distance (m)",
        "Calories (kcal)",
    ]
    assert len(activities) == len(mixed_activities)
    summary = sheets["Summary"]
    week_total = summary[(summary["Type"] == "activity") & (summary["Timespan"] == "week")]
    assert int(week_total["Distance (m)"].iloc[0]) == 6500
    assert bool(sheets["Goals"]["Achieved"].iloc[0]) is False


def test_write_report_without_activities(tmp_path, today) -> None:
    path = tmp_path / "empty.xlsx"
    write_activity_report(path, [], today)
    sheets = pd.read_excel(path, sheet_name=None)
    assert list(sheets["Activities"].columns) == ["Message"]
    assert "Goals" not in sheets
