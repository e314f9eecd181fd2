from datetime import datetime
import logging

from .config import LOG_LEVEL, REPORT_FILE, REPORT_FILE_TIMESTAMP_ENABLED
from .errors import ParseError, StorageError
from .excel_writer import write_activity_report
from .services import TrackerService


def _setup_logging() -> None:
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=LOG_LEVEL,
            format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        )


def _resolve_output_path() -> str:
    if REPORT_FILE_TIMESTAMP_ENABLED:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        return f"{REPORT_FILE}_{timestamp}.xlsx"
    return f"{REPORT_FILE}.xlsx"


def main() -> None:
    _setup_logging()
    output_file = _resolve_output_path()

    service = TrackerService()
    try:
        service.load()
    except (ParseError, StorageError) as exc:
        logging.error("Failed to load activity log: %s", exc)
        return

    progress = service.goal_progress()
    for p in progress:
        logging.info(
            "Goal %s %s this %s: %d/%d%s",
            p.goal.activity_type.value,
            p.goal.goal_type.value,
            p.goal.timespan.value,
            p.value,
            p.goal.target,
            " (achieved)" if p.achieved else "",
        )

    write_activity_report(
        output_file,
        service.activities,
        service.config.clock(),
        goal_progress=progress,
    )
    logging.info(
        "Report saved to %s (activities=%d, goals=%d)",
        output_file,
        len(service.activities),
        len(progress),
    )
