"""Persisted list of activities with date lookups and timespan totals."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any, Dict, Iterable, List

from . import activity_aggregation
from .activity_types import ActivityType, normalize_activity_type
from .errors import InvalidActivityError, ParseError
from .models import ACTIVITY_CLASSES, Activity, SwimmingStyle
from .storable import PersistedCollection, StorageBackend
from .timespan import Clock, Timespan, system_clock
from .utils import decode_record, json_dumps_sorted, require_field, require_int

_BASE_INT_FIELDS = ("moving_time", "distance", "calories")


def _parse_start(data: Dict[str, Any]) -> datetime:
    raw = require_field(data, "start_datetime")
    if not isinstance(raw, str):
        raise ParseError(f"Field 'start_datetime' must be text, got {raw!r}")
    try:
        return datetime.fromisoformat(raw)
    except ValueError as exc:
        raise ParseError(f"Invalid start_datetime '{raw}'") from exc


def _parse_variant_value(name: str, data: Dict[str, Any]) -> Any:
    if name == "style":
        raw = require_field(data, name)
        try:
            return SwimmingStyle(str(raw).lower())
        except ValueError as exc:
            raise ParseError(f"Unknown swimming style '{raw}'") from exc
    return require_int(data, name)


def activity_from_dict(data: Dict[str, Any]) -> Activity:
    """Rebuild an activity from its persisted mapping.

    Derived fields are recomputed; when a stored derived value is present it
    must agree with the recomputed one.
    """

    try:
        activity_type = normalize_activity_type(require_field(data, "type"))
    except ValueError as exc:
        raise ParseError(str(exc)) from exc
    if activity_type is None:
        raise ParseError("Field 'type' is blank")
    cls = ACTIVITY_CLASSES[activity_type]

    caption = require_field(data, "caption")
    if not isinstance(caption, str):
        raise ParseError(f"Field 'caption' must be text, got {caption!r}")
    moving_time, distance, calories = (
        require_int(data, key) for key in _BASE_INT_FIELDS
    )
    extra = {name: _parse_variant_value(name, data) for name in cls.VARIANT_FIELDS}
    try:
        moving = timedelta(seconds=moving_time)
    except OverflowError as exc:
        raise ParseError(f"moving_time {moving_time} is out of range") from exc
    try:
        activity = cls(
            caption,
            moving,
            distance,
            _parse_start(data),
            calories,
            **extra,
        )
    except (InvalidActivityError, OverflowError) as exc:
        raise ParseError(f"Invalid {activity_type.value} record: {exc}") from exc

    for name in cls.DERIVED_FIELDS:
        if name in data and data[name] != getattr(activity, name):
            raise ParseError(
                f"Stored {name}={data[name]!r} disagrees with computed "
                f"{getattr(activity, name)!r}"
            )
    return activity


class ActivityList(PersistedCollection[Activity]):
    """Activities in insertion order, persisted as one JSON object per line."""

    def __init__(
        self,
        backend: StorageBackend | None = None,
        items: Iterable[Activity] | None = None,
        clock: Clock = system_clock,
    ) -> None:
        super().__init__(backend, items)
        self._clock = clock

    def find(self, day: date) -> List[Activity]:
        """Return activities that started on ``day``, in list order."""

        return self.find_matching(lambda act: act.start_datetime.date() == day)

    def sort(self) -> None:
        """Sort by start time, most recent first; ties keep insertion order."""

        self.sort_by(key=lambda act: act.start_datetime, reverse=True)

    def filter_by_timespan(self, timespan: Timespan) -> List[Activity]:
        return activity_aggregation.filter_by_timespan(
            self._items, timespan, self._clock()
        )

    def get_total_distance(
        self, activity_type: ActivityType, timespan: Timespan
    ) -> int:
        return activity_aggregation.total_distance(
            self._items, activity_type, timespan, self._clock()
        )

    def get_total_duration(
        self, activity_type: ActivityType, timespan: Timespan
    ) -> int:
        return activity_aggregation.total_duration(
            self._items, activity_type, timespan, self._clock()
        )

    def parse(self, text: str) -> Activity:
        return activity_from_dict(decode_record(text))

    def unparse(self, item: Activity) -> str:
        return json_dumps_sorted(item.to_dict())


__all__ = ["ActivityList", "activity_from_dict"]
