"""Activity tracker service.

Owns the activity and goal lists and exposes the query API used by the
command interpreter and reporting layers. Aggregation itself lives in the
pure ``activity_aggregation`` module; this class wires lists, backends and
the clock together and logs what it does.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
import logging
from typing import List

from ..activity_list import ActivityList
from ..activity_types import ActivityType
from ..config import ACTIVITY_FILE, GOAL_FILE
from ..errors import ParseError
from ..goals import Goal, GoalList, GoalProgress
from ..models import Activity
from ..storable import StorageBackend, TextFileBackend
from ..timespan import Clock, Timespan, system_clock


def _default_activity_backend() -> StorageBackend:
    return TextFileBackend(ACTIVITY_FILE)


def _default_goal_backend() -> StorageBackend:
    return TextFileBackend(GOAL_FILE)


@dataclass(slots=True)
class TrackerServiceConfig:
    activity_backend: StorageBackend = field(default_factory=_default_activity_backend)
    goal_backend: StorageBackend = field(default_factory=_default_goal_backend)
    clock: Clock = system_clock
    logger: logging.Logger | None = None


class TrackerService:
    def __init__(self, config: TrackerServiceConfig | None = None):
        self.config = config or TrackerServiceConfig()
        self._log = self.config.logger or logging.getLogger(self.__class__.__name__)
        self.activities = ActivityList(
            self.config.activity_backend, clock=self.config.clock
        )
        self.goals = GoalList(self.config.goal_backend, clock=self.config.clock)

    def load(self) -> None:
        """Load activities and goals; a malformed line aborts with ``ParseError``."""

        for name, records in (("activities", self.activities), ("goals", self.goals)):
            try:
                records.load()
            except ParseError as exc:
                self._log.error("Failed to load %s: %s", name, exc)
                raise
        self._log.info(
            "Loaded %d activities and %d goals", len(self.activities), len(self.goals)
        )

    def save(self) -> None:
        self.activities.save()
        self.goals.save()
        self._log.info(
            "Saved %d activities and %d goals", len(self.activities), len(self.goals)
        )

    def add_activity(self, activity: Activity) -> None:
        self.activities.append(activity)
        self._log.debug(
            "Added %s '%s' starting %s",
            activity.activity_type.value,
            activity.caption,
            activity.start_datetime,
        )

    def add_goal(self, goal: Goal) -> None:
        self.goals.append(goal)

    def sort(self) -> None:
        self.activities.sort()

    def find(self, day: date) -> List[Activity]:
        return self.activities.find(day)

    def filter_by_timespan(self, timespan: Timespan) -> List[Activity]:
        return self.activities.filter_by_timespan(timespan)

    def total_distance(self, activity_type: ActivityType, timespan: Timespan) -> int:
        return self.activities.get_total_distance(activity_type, timespan)

    def total_duration(self, activity_type: ActivityType, timespan: Timespan) -> int:
        return self.activities.get_total_duration(activity_type, timespan)

    def goal_progress(self) -> List[GoalProgress]:
        progress = self.goals.progress(self.activities)
        achieved = sum(1 for p in progress if p.achieved)
        self._log.info("Evaluated %d goals (%d achieved)", len(progress), achieved)
        return progress


__all__ = ["TrackerService", "TrackerServiceConfig"]
