"""Central configuration for the activity log.

All values are constants imported by the rest of the package. Values can be
overridden through environment variables (optionally via a local `.env`).
"""

from __future__ import annotations

import os

from dotenv import load_dotenv


def _env_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_bool(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


# Load .env from the current directory or any parent folder.
load_dotenv()


# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------
# One JSON record per line. Paths can be absolute or relative.
ACTIVITY_FILE = os.getenv("FITNESS_LOG_ACTIVITY_FILE", "data/activities.jsonl")
GOAL_FILE = os.getenv("FITNESS_LOG_GOAL_FILE", "data/goals.jsonl")


# ---------------------------------------------------------------------------
# Report output
# ---------------------------------------------------------------------------
REPORT_FILE = os.getenv("FITNESS_LOG_REPORT_FILE", "activity_report")

# Append _YYYYMMDD_HHMMSS to the report name when True.
REPORT_FILE_TIMESTAMP_ENABLED = _env_bool("FITNESS_LOG_REPORT_TIMESTAMP", True)


# ---------------------------------------------------------------------------
# Activity statistics
# ---------------------------------------------------------------------------
# Pool length used to derive swim laps.
SWIM_LAP_LENGTH_M = 50


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = os.getenv("FITNESS_LOG_LEVEL", "INFO").upper()


# ---------------------------------------------------------------------------
# Excel formatting
# ---------------------------------------------------------------------------
# Keep the activities sheet in a fixed column order.
ACTIVITY_COLUMN_ORDER = [
    "Type",
    "Caption",
    "Start",
    "Moving Time (h:mm:ss)",
    "Distance (m)",
    "Calories (kcal)",
]

# Automatically size columns after writing each sheet (openpyxl only).
EXCEL_AUTOSIZE_COLUMNS = True
EXCEL_AUTOSIZE_MAX_WIDTH = 50  # characters
EXCEL_AUTOSIZE_MIN_WIDTH = 6  # characters
EXCEL_AUTOSIZE_PADDING = 2  # extra characters added to the detected max
# Skip autosize for very large sheets (performance guard).
EXCEL_AUTOSIZE_MAX_ROWS = _env_int("FITNESS_LOG_AUTOSIZE_MAX_ROWS", 5000)
