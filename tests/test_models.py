"""Tests for activity records and their derived statistics."""

from __future__ import annotations

import dataclasses
from datetime import datetime, timedelta, timezone

import pytest

from fitness_log.activity_types import ActivityType
from fitness_log.errors import InvalidActivityError
from fitness_log.models import Activity, Cycle, Run, Swim, SwimmingStyle

from conftest import make_cycle, make_run, make_swim


def test_swim_derives_laps_and_average_lap_time() -> None:
    swim = make_swim(150, 3, "2026-10-20T07:00:00")
    assert swim.laps == 3
    assert swim.average_lap_time == 60


def test_swim_lap_counts_floor_partial_laps() -> None:
    swim = make_swim(170, 7, "2026-10-20T07:00:00")
    assert swim.laps == 3
    assert swim.average_lap_time == 140


def test_swim_shorter_than_one_lap_is_rejected() -> None:
    with pytest.raises(InvalidActivityError):
        make_swim(30, 2, "2026-10-20T07:00:00")


def test_swim_default_style_is_freestyle() -> None:
    assert make_swim(100, 2, "2026-10-20T07:00:00").style is SwimmingStyle.FREESTYLE


def test_derived_fields_are_not_constructor_arguments() -> None:
    with pytest.raises(TypeError):
        Swim("Swim", timedelta(minutes=3), 150, datetime(2026, 10, 20), laps=5)


def test_records_are_immutable() -> None:
    run = make_run(5000, 25, "2026-10-21T07:00:00")
    with pytest.raises(dataclasses.FrozenInstanceError):
        run.distance = 10  # type: ignore[misc]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"distance": -1},
        {"calories": -5},
        {"moving_time": timedelta(seconds=-1)},
        {"distance": 12.5},
        {"start_datetime": "2026-10-21"},
    ],
)
def test_invalid_base_fields_are_rejected(kwargs) -> None:
    fields = {
        "caption": "Workout",
        "moving_time": timedelta(minutes=10),
        "distance": 1000,
        "start_datetime": datetime(2026, 10, 21, 7, 0),
    }
    fields.update(kwargs)
    with pytest.raises(InvalidActivityError):
        Activity(**fields)


def test_start_with_utc_offset_is_rejected() -> None:
    with pytest.raises(InvalidActivityError):
        Activity(
            "Workout",
            timedelta(minutes=10),
            1000,
            datetime(2026, 10, 21, 7, 0, tzinfo=timezone.utc),
        )


def test_start_and_moving_time_truncated_to_seconds() -> None:
    act = Activity(
        "Workout",
        timedelta(seconds=90, microseconds=700),
        0,
        datetime(2026, 10, 21, 7, 0, 5, 123456),
    )
    assert act.start_datetime == datetime(2026, 10, 21, 7, 0, 5)
    assert act.moving_time_seconds == 90


def test_run_average_pace_in_seconds_per_km() -> None:
    run = make_run(5000, 25, "2026-10-21T07:00:00")
    assert run.average_pace == 300
    assert make_run(0, 20, "2026-10-21T07:00:00").average_pace == 0


def test_cycle_average_speed_in_kmh() -> None:
    ride = make_cycle(40000, 90, "2026-10-03T09:00:00")
    assert ride.average_speed == 26.67
    assert make_cycle(1000, 0, "2026-10-03T09:00:00").average_speed == 0.0


def test_variant_tags() -> None:
    assert make_run(1, 1, "2026-10-21T07:00:00").activity_type is ActivityType.RUN
    assert make_swim(50, 1, "2026-10-21T07:00:00").activity_type is ActivityType.SWIM
    assert make_cycle(1, 1, "2026-10-21T07:00:00").activity_type is ActivityType.CYCLE
    assert Activity("x", timedelta(0), 0, datetime(2026, 1, 1)).activity_type is ActivityType.ACTIVITY


def test_to_dict_includes_variant_and_derived_fields() -> None:
    swim = make_swim(150, 3, "2026-10-20T07:00:00", style=SwimmingStyle.BUTTERFLY)
    data = swim.to_dict()
    assert data["type"] == "swim"
    assert data["style"] == "butterfly"
    assert data["laps"] == 3
    assert data["average_lap_time"] == 60
    assert data["moving_time"] == 180
    assert data["start_datetime"] == "2026-10-20T07:00:00"
