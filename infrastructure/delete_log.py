"""CSV audit log of batch removals."""

from __future__ import annotations

import csv
from datetime import datetime
from pathlib import Path

from loguru import logger

from core.services.interfaces import BatchResult
from infrastructure.logging import get_delete_log_directory

LOG_HEADERS = ["Category", "Identifier", "Name", "Outcome", "Reason"]


def write_delete_log(result: BatchResult, log_dir: str | None = None) -> str | None:
    """Write one row per removed, failed and skipped item.

    Args:
        result: Outcome of a finished batch.
        log_dir: Target directory; defaults to the state directory's `delete_logs`.

    Returns:
        Path of the written file, or None if it could not be written.
    """
    try:
        base_dir = Path(log_dir or get_delete_log_directory())
        base_dir.mkdir(parents=True, exist_ok=True)
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = base_dir / f"delete_{ts}.csv"
        with log_path.open("w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(LOG_HEADERS)
            for item in result.removed:
                writer.writerow([item.category.label, item.item_id, item.name, "removed", ""])
            for failure in result.failures:
                writer.writerow(
                    [
                        failure.category.label,
                        failure.item_id,
                        failure.name,
                        "failed",
                        failure.reason,
                    ]
                )
            for category, item_id in result.skipped:
                writer.writerow([category.label, item_id, "", "skipped", "no longer exists"])
        result.log_path = str(log_path)
        logger.info(
            "Delete log written: {} ({} removed, {} failed, {} skipped)",
            log_path,
            len(result.removed),
            len(result.failures),
            len(result.skipped),
        )
        return str(log_path)
    except (OSError, ValueError) as ex:
        logger.error("Write delete log failed: {}", ex)
        return None
