"""Calendar timespans evaluated relative to an injected "today".

Weeks start on Monday. Every function here is pure: the current date is
always passed in, normally obtained from a ``Clock``.
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta
from enum import Enum
from typing import Any, Callable, Tuple

Clock = Callable[[], date]


class Timespan(Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


def system_clock() -> date:
    return date.today()


def parse_timespan(value: Any) -> Timespan:
    if isinstance(value, Timespan):
        return value
    try:
        return Timespan(str(value).strip().lower())
    except ValueError:
        raise ValueError(f"Unknown timespan '{value}'") from None


def timespan_window(timespan: Timespan, today: date) -> Tuple[date, date]:
    """Return the inclusive ``(first_day, last_day)`` of the current window."""

    if timespan is Timespan.DAY:
        return today, today
    if timespan is Timespan.WEEK:
        monday = today - timedelta(days=today.weekday())
        return monday, monday + timedelta(days=6)
    if timespan is Timespan.MONTH:
        last = calendar.monthrange(today.year, today.month)[1]
        return today.replace(day=1), today.replace(day=last)
    if timespan is Timespan.YEAR:
        return date(today.year, 1, 1), date(today.year, 12, 31)
    raise ValueError(f"Unsupported timespan {timespan!r}")


def matches(day: date, timespan: Timespan, today: date) -> bool:
    """Return ``True`` when ``day`` falls in the current ``timespan`` window."""

    first, last = timespan_window(timespan, today)
    return first <= day <= last


__all__ = [
    "Clock",
    "Timespan",
    "matches",
    "parse_timespan",
    "system_clock",
    "timespan_window",
]
