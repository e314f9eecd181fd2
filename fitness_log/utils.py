"""General utility helpers shared across modules."""

from __future__ import annotations

import json
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Any, Dict

from .errors import ParseError


def format_duration(seconds: int) -> str:
    """Format seconds into an ``H:MM:SS`` string."""

    hours, rem = divmod(int(seconds), 3600)
    mins, sec = divmod(rem, 60)
    return f"{hours}:{mins:02d}:{sec:02d}"


def _normalise_value(value: Any) -> Any:
    """Convert objects to JSON-friendly representations."""

    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, timedelta):
        return int(value.total_seconds())
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [_normalise_value(item) for item in value]
    if isinstance(value, dict):
        return {str(key): _normalise_value(val) for key, val in value.items()}
    return value


def json_dumps_sorted(value: Any) -> str:
    """Return canonical single-line JSON for persistence / comparisons."""

    normalised = _normalise_value(value)
    return json.dumps(
        normalised, sort_keys=True, separators=(",", ":"), ensure_ascii=False
    )


def decode_record(text: str) -> Dict[str, Any]:
    """Parse one persisted line into a JSON object."""

    try:
        data = json.loads(text)
    except ValueError as exc:
        raise ParseError(f"Malformed record: {exc}") from exc
    if not isinstance(data, dict):
        raise ParseError("Record must be a JSON object")
    return data


def require_field(data: Dict[str, Any], key: str) -> Any:
    if key not in data:
        raise ParseError(f"Missing field '{key}'")
    return data[key]


def require_int(data: Dict[str, Any], key: str) -> int:
    value = require_field(data, key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ParseError(f"Field '{key}' must be an integer, got {value!r}")
    return value
