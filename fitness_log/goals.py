"""Distance / duration goals measured over a timespan window."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict, Iterable, List

from . import activity_aggregation
from .activity_types import ActivityType, normalize_activity_type
from .errors import InvalidGoalError, ParseError
from .models import Activity
from .storable import PersistedCollection, StorageBackend
from .timespan import Clock, Timespan, parse_timespan, system_clock
from .utils import decode_record, json_dumps_sorted, require_field, require_int


class GoalType(Enum):
    DISTANCE = "distance"  # metres
    DURATION = "duration"  # seconds


@dataclass(frozen=True)
class Goal:
    activity_type: ActivityType
    goal_type: GoalType
    timespan: Timespan
    target: int

    def __post_init__(self) -> None:
        if not isinstance(self.activity_type, ActivityType):
            raise InvalidGoalError(f"Unknown activity type {self.activity_type!r}")
        if not isinstance(self.goal_type, GoalType):
            raise InvalidGoalError(f"Unknown goal type {self.goal_type!r}")
        if not isinstance(self.timespan, Timespan):
            raise InvalidGoalError(f"Unknown timespan {self.timespan!r}")
        if isinstance(self.target, bool) or not isinstance(self.target, int):
            raise InvalidGoalError(f"Goal target must be an integer, got {self.target!r}")
        if self.target <= 0:
            raise InvalidGoalError(f"Goal target must be positive, got {self.target}")

    def current_value(self, activities: Iterable[Activity], today: date) -> int:
        if self.goal_type is GoalType.DISTANCE:
            return activity_aggregation.total_distance(
                activities, self.activity_type, self.timespan, today
            )
        return activity_aggregation.total_duration(
            activities, self.activity_type, self.timespan, today
        )

    def is_achieved(self, activities: Iterable[Activity], today: date) -> bool:
        return self.current_value(activities, today) >= self.target

    def to_dict(self) -> Dict[str, Any]:
        return {
            "activity_type": self.activity_type.value,
            "goal_type": self.goal_type.value,
            "timespan": self.timespan.value,
            "target": self.target,
        }


@dataclass(frozen=True)
class GoalProgress:
    goal: Goal
    value: int

    @property
    def achieved(self) -> bool:
        return self.value >= self.goal.target

    @property
    def ratio(self) -> float:
        return self.value / self.goal.target


def goal_from_dict(data: Dict[str, Any]) -> Goal:
    try:
        activity_type = normalize_activity_type(require_field(data, "activity_type"))
        goal_type = GoalType(str(require_field(data, "goal_type")).strip().lower())
        timespan = parse_timespan(require_field(data, "timespan"))
    except ValueError as exc:
        raise ParseError(str(exc)) from exc
    try:
        return Goal(activity_type, goal_type, timespan, require_int(data, "target"))
    except InvalidGoalError as exc:
        raise ParseError(f"Invalid goal record: {exc}") from exc


class GoalList(PersistedCollection[Goal]):
    """Goals persisted as one JSON object per line."""

    def __init__(
        self,
        backend: StorageBackend | None = None,
        items: Iterable[Goal] | None = None,
        clock: Clock = system_clock,
    ) -> None:
        super().__init__(backend, items)
        self._clock = clock

    def progress(self, activities: Iterable[Activity]) -> List[GoalProgress]:
        acts = list(activities)
        today = self._clock()
        return [GoalProgress(goal, goal.current_value(acts, today)) for goal in self]

    def parse(self, text: str) -> Goal:
        return goal_from_dict(decode_record(text))

    def unparse(self, item: Goal) -> str:
        return json_dumps_sorted(item.to_dict())


__all__ = ["Goal", "GoalList", "GoalProgress", "GoalType", "goal_from_dict"]
