"""Timespan / activity type aggregation helpers.

Pure transformation: given activities, a variant tag, a timespan and the
current date it produces filtered lists or totals. Nothing here mutates its
input, so the same functions serve ``ActivityList`` and reporting code.
"""

from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, List

from .activity_types import ActivityType, activity_type_matches
from .models import Activity
from .timespan import Timespan, matches


def _activity_in_timespan(act: Activity, timespan: Timespan, today: date) -> bool:
    return matches(act.start_datetime.date(), timespan, today)


def _matching_activities(
    activities: Iterable[Activity],
    activity_type: ActivityType,
    timespan: Timespan,
    today: date,
) -> List[Activity]:
    return [
        act
        for act in filter_by_timespan(activities, timespan, today)
        if activity_type_matches(act.activity_type, activity_type)
    ]


def filter_by_timespan(
    activities: Iterable[Activity], timespan: Timespan, today: date
) -> List[Activity]:
    """Return activities starting inside the current window, in input order."""

    return [act for act in activities if _activity_in_timespan(act, timespan, today)]


def total_distance(
    activities: Iterable[Activity],
    activity_type: ActivityType,
    timespan: Timespan,
    today: date,
) -> int:
    """Return metres covered by ``activity_type`` records in the window."""

    return sum(
        act.distance
        for act in _matching_activities(activities, activity_type, timespan, today)
    )


def total_duration(
    activities: Iterable[Activity],
    activity_type: ActivityType,
    timespan: Timespan,
    today: date,
) -> int:
    """Return moving time in seconds of ``activity_type`` records in the window."""

    return sum(
        act.moving_time_seconds
        for act in _matching_activities(activities, activity_type, timespan, today)
    )


def summarize(activities: Iterable[Activity], today: date) -> List[Dict[str, object]]:
    """Return one row per (activity type, timespan) pair.

    Rows for the base ``ACTIVITY`` tag cover every record; sport rows only
    their own variant. Combinations without records still appear with zeros.
    """

    acts = list(activities)
    rows: List[Dict[str, object]] = []
    for activity_type in ActivityType:
        for timespan in Timespan:
            matched = _matching_activities(acts, activity_type, timespan, today)
            rows.append(
                {
                    "Type": activity_type.value,
                    "Timespan": timespan.value,
                    "Activities": len(matched),
                    "Distance (m)": sum(act.distance for act in matched),
                    "Moving Time (s)": sum(
                        act.moving_time_seconds for act in matched
                    ),
                }
            )
    return rows


__all__ = ["filter_by_timespan", "summarize", "total_distance", "total_duration"]
