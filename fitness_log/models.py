"""Activity records: a generic activity plus sport specific variants.

Records are frozen once built. Derived statistics (laps, pace, speed) are
never passed in by callers; each variant computes them in ``__post_init__``
from the base fields.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, ClassVar, Dict, Tuple

from .activity_types import ActivityType
from .config import SWIM_LAP_LENGTH_M
from .errors import InvalidActivityError


def _require_non_negative_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidActivityError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise InvalidActivityError(f"{name} must not be negative, got {value}")
    return value


@dataclass(frozen=True)
class Activity:
    caption: str
    moving_time: timedelta
    distance: int
    start_datetime: datetime
    calories: int = 0

    TYPE: ClassVar[ActivityType] = ActivityType.ACTIVITY
    VARIANT_FIELDS: ClassVar[Tuple[str, ...]] = ()
    DERIVED_FIELDS: ClassVar[Tuple[str, ...]] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.caption, str):
            raise InvalidActivityError(f"caption must be text, got {self.caption!r}")
        if not isinstance(self.start_datetime, datetime):
            raise InvalidActivityError(
                f"start_datetime must be a datetime, got {self.start_datetime!r}"
            )
        if self.start_datetime.tzinfo is not None:
            raise InvalidActivityError(
                f"start_datetime must be local time without an offset, got "
                f"{self.start_datetime.isoformat()}"
            )
        if not isinstance(self.moving_time, timedelta):
            raise InvalidActivityError(
                f"moving_time must be a timedelta, got {self.moving_time!r}"
            )
        if self.moving_time < timedelta(0):
            raise InvalidActivityError(
                f"moving_time must not be negative, got {self.moving_time}"
            )
        _require_non_negative_int("distance", self.distance)
        _require_non_negative_int("calories", self.calories)
        # Persisted precision is whole seconds for both timestamps and durations.
        object.__setattr__(
            self, "start_datetime", self.start_datetime.replace(microsecond=0)
        )
        object.__setattr__(
            self, "moving_time", timedelta(seconds=int(self.moving_time.total_seconds()))
        )

    @property
    def activity_type(self) -> ActivityType:
        return self.TYPE

    @property
    def moving_time_seconds(self) -> int:
        return int(self.moving_time.total_seconds())

    def to_dict(self) -> Dict[str, Any]:
        """Return the persisted field mapping, tagged with the variant name."""

        data: Dict[str, Any] = {
            "type": self.TYPE.value,
            "caption": self.caption,
            "start_datetime": self.start_datetime.isoformat(),
            "moving_time": self.moving_time_seconds,
            "distance": self.distance,
            "calories": self.calories,
        }
        for name in self.VARIANT_FIELDS + self.DERIVED_FIELDS:
            value = getattr(self, name)
            data[name] = value.value if isinstance(value, Enum) else value
        return data


class SwimmingStyle(Enum):
    BUTTERFLY = "butterfly"
    BACKSTROKE = "backstroke"
    BREASTSTROKE = "breaststroke"
    FREESTYLE = "freestyle"


@dataclass(frozen=True)
class Swim(Activity):
    """A pool swim with lap statistics.

    Laps assume a 50 m pool; swims shorter than one lap are rejected because
    the average lap time would be undefined.
    """

    style: SwimmingStyle = SwimmingStyle.FREESTYLE
    laps: int = field(init=False)
    average_lap_time: int = field(init=False)

    TYPE: ClassVar[ActivityType] = ActivityType.SWIM
    VARIANT_FIELDS: ClassVar[Tuple[str, ...]] = ("style",)
    DERIVED_FIELDS: ClassVar[Tuple[str, ...]] = ("laps", "average_lap_time")

    def __post_init__(self) -> None:
        super().__post_init__()
        if not isinstance(self.style, SwimmingStyle):
            raise InvalidActivityError(f"Unknown swimming style {self.style!r}")
        laps = self.calculate_laps()
        if laps == 0:
            raise InvalidActivityError(
                f"Swim distance {self.distance} m is shorter than one "
                f"{SWIM_LAP_LENGTH_M} m lap"
            )
        object.__setattr__(self, "laps", laps)
        object.__setattr__(self, "average_lap_time", self.calculate_average_lap_time())

    def calculate_laps(self) -> int:
        return self.distance // SWIM_LAP_LENGTH_M

    def calculate_average_lap_time(self) -> int:
        """Return the average lap time in whole seconds."""

        laps = self.calculate_laps()
        if laps == 0:
            raise InvalidActivityError("Average lap time is undefined without laps")
        return self.moving_time_seconds // laps


@dataclass(frozen=True)
class Run(Activity):
    elevation: int = 0
    steps: int = 0
    average_pace: int = field(init=False)

    TYPE: ClassVar[ActivityType] = ActivityType.RUN
    VARIANT_FIELDS: ClassVar[Tuple[str, ...]] = ("elevation", "steps")
    DERIVED_FIELDS: ClassVar[Tuple[str, ...]] = ("average_pace",)

    def __post_init__(self) -> None:
        super().__post_init__()
        _require_non_negative_int("elevation", self.elevation)
        _require_non_negative_int("steps", self.steps)
        object.__setattr__(self, "average_pace", self.calculate_average_pace())

    def calculate_average_pace(self) -> int:
        """Return seconds per kilometre, 0 for a run without distance."""

        if self.distance == 0:
            return 0
        return self.moving_time_seconds * 1000 // self.distance


@dataclass(frozen=True)
class Cycle(Activity):
    elevation: int = 0
    average_speed: float = field(init=False)

    TYPE: ClassVar[ActivityType] = ActivityType.CYCLE
    VARIANT_FIELDS: ClassVar[Tuple[str, ...]] = ("elevation",)
    DERIVED_FIELDS: ClassVar[Tuple[str, ...]] = ("average_speed",)

    def __post_init__(self) -> None:
        super().__post_init__()
        _require_non_negative_int("elevation", self.elevation)
        object.__setattr__(self, "average_speed", self.calculate_average_speed())

    def calculate_average_speed(self) -> float:
        """Return km/h rounded to two decimals, 0.0 without moving time."""

        seconds = self.moving_time_seconds
        if seconds == 0:
            return 0.0
        return round(self.distance / 1000 / (seconds / 3600), 2)


ACTIVITY_CLASSES: Dict[ActivityType, type[Activity]] = {
    cls.TYPE: cls for cls in (Activity, Run, Swim, Cycle)
}


__all__ = [
    "ACTIVITY_CLASSES",
    "Activity",
    "Cycle",
    "Run",
    "Swim",
    "SwimmingStyle",
]
