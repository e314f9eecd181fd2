"""Service layer package.

Exports high-level services consumed by orchestration / presentation layers.
"""

from .tracker_service import TrackerService, TrackerServiceConfig

__all__ = ["TrackerService", "TrackerServiceConfig"]
