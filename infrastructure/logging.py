"""Logging initialization utilities using loguru."""

from __future__ import annotations

import os
from pathlib import Path

from loguru import logger

APP_DIR_NAME = "dockmark"


def get_state_directory() -> Path:
    """Base directory for logs and audit files ($XDG_STATE_HOME/dockmark)."""
    base = os.environ.get("XDG_STATE_HOME") or str(Path.home() / ".local" / "state")
    return Path(base) / APP_DIR_NAME


def get_log_directory() -> str:
    """Get the main log directory path."""
    return str(get_state_directory() / "logs")


def get_delete_log_directory() -> str:
    """Get the delete audit log directory path."""
    return str(get_state_directory() / "delete_logs")


def init_logging(log_dir: str | None = None, level: str = "INFO") -> Path:
    """Initialize rotating file logging under the given directory.

    The terminal belongs to the panels, so loguru's default stderr sink is
    removed and everything goes to the file.
    """
    log_path = Path(log_dir or get_log_directory())
    log_path.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.add(
        str(log_path / "app_{time:YYYYMMDD}.log"),
        rotation="10 MB",
        retention="10 days",
        compression="zip",
        enqueue=True,
        backtrace=False,
        diagnose=False,
        level=level,
    )
    return log_path


def find_latest_log_file(log_dir: str | None = None, pattern: str = "app_*.log") -> Path | None:
    """Find the most recently modified file matching `pattern`."""
    try:
        log_path = Path(log_dir or get_log_directory())
        if not log_path.exists():
            return None

        log_files = list(log_path.glob(pattern))
        if not log_files:
            return None

        return max(log_files, key=lambda p: p.stat().st_mtime)
    except (OSError, ValueError):
        return None


def find_latest_delete_log_file(log_dir: str | None = None) -> Path | None:
    """Find the latest delete audit log."""
    return find_latest_log_file(log_dir or get_delete_log_directory(), "delete_*.csv")
