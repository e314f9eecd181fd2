"""Activity variant tags and the taxonomy used to match them."""

from __future__ import annotations

from enum import Enum
from typing import Any

__all__ = ["ActivityType", "normalize_activity_type", "activity_type_matches"]


class ActivityType(Enum):
    ACTIVITY = "activity"
    RUN = "run"
    SWIM = "swim"
    CYCLE = "cycle"

    @property
    def parent(self) -> "ActivityType | None":
        return _PARENTS.get(self)


# Every concrete sport is a kind of generic activity.
_PARENTS: dict[ActivityType, ActivityType] = {
    ActivityType.RUN: ActivityType.ACTIVITY,
    ActivityType.SWIM: ActivityType.ACTIVITY,
    ActivityType.CYCLE: ActivityType.ACTIVITY,
}


def normalize_activity_type(value: Any) -> ActivityType | None:
    """Return the ``ActivityType`` named by ``value`` or ``None`` when blank.

    Accepts enum members as well as case-insensitive names such as ``"Run"``
    or ``" swim "``. Unknown names raise ``ValueError``.
    """

    if value is None or isinstance(value, ActivityType):
        return value
    normalized = str(value).strip().lower()
    if not normalized:
        return None
    try:
        return ActivityType(normalized)
    except ValueError:
        raise ValueError(f"Unknown activity type '{value}'") from None


def activity_type_matches(
    instance_type: ActivityType, query_type: ActivityType
) -> bool:
    """Return ``True`` when ``instance_type`` is ``query_type`` or a sub-type.

    Args:
        instance_type: Tag of the concrete record being inspected.
        query_type: Tag requested by the caller. ``ActivityType.ACTIVITY``
            matches every record.

    Returns:
        ``True`` if walking up the taxonomy from ``instance_type`` reaches
        ``query_type``, otherwise ``False``.
    """

    current: ActivityType | None = instance_type
    while current is not None:
        if current is query_type:
            return True
        current = current.parent
    return False
