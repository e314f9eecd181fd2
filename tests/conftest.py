"""Global pytest fixtures & helpers.

Adds project root to path and provides reusable factories plus a fixed clock
so timespan tests never depend on the wall-clock date.
"""
from __future__ import annotations

import os
import sys
from datetime import date, datetime, timedelta
import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from fitness_log.activity_list import ActivityList
from fitness_log.models import Activity, Cycle, Run, Swim, SwimmingStyle
from fitness_log.storable import MemoryBackend

# Wednesday; its Monday-start week runs 2026-10-19 .. 2026-10-25.
TODAY = date(2026, 10, 21)


# --- Factory helpers -------------------------------------------------
def make_run(distance, minutes, iso, caption="Run", **kwargs):
    return Run(caption, timedelta(minutes=minutes), distance, datetime.fromisoformat(iso), **kwargs)


def make_swim(distance, minutes, iso, caption="Swim", **kwargs):
    return Swim(caption, timedelta(minutes=minutes), distance, datetime.fromisoformat(iso), **kwargs)


def make_cycle(distance, minutes, iso, caption="Ride", **kwargs):
    return Cycle(caption, timedelta(minutes=minutes), distance, datetime.fromisoformat(iso), **kwargs)


def make_activity(distance, minutes, iso, caption="Workout", **kwargs):
    return Activity(caption, timedelta(minutes=minutes), distance, datetime.fromisoformat(iso), **kwargs)


# --- Fixtures --------------------------------------------------------
@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def clock():
    return lambda: TODAY


@pytest.fixture
def mixed_activities():
    return [
        make_run(5000, 25, "2026-10-21T07:00:00", caption="Morning Run"),
        make_swim(1500, 30, "2026-10-20T18:00:00", style=SwimmingStyle.BREASTSTROKE),
        make_run(10000, 55, "2026-10-12T08:00:00", caption="Long Run"),
        make_cycle(40000, 90, "2026-10-03T09:00:00", elevation=350),
        make_activity(0, 45, "2026-03-14T17:30:00", caption="Yoga"),
        make_run(8000, 42, "2025-12-31T23:30:00", caption="NYE Run"),
    ]


@pytest.fixture
def activity_list(mixed_activities, clock):
    return ActivityList(MemoryBackend(), items=mixed_activities, clock=clock)
