"""Personal activity log: typed activity records with timespan totals."""

from .activity_list import ActivityList
from .activity_types import ActivityType
from .errors import InvalidActivityError, InvalidGoalError, ParseError, StorageError
from .goals import Goal, GoalList, GoalType
from .main import main
from .models import Activity, Cycle, Run, Swim, SwimmingStyle
from .timespan import Timespan

__all__ = [
    "main",
    "Activity",
    "ActivityList",
    "ActivityType",
    "Cycle",
    "Goal",
    "GoalList",
    "GoalType",
    "InvalidActivityError",
    "InvalidGoalError",
    "ParseError",
    "Run",
    "StorageError",
    "Swim",
    "SwimmingStyle",
    "Timespan",
]
