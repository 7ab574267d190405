"""
Logging setup for PassField.

Console and file share one format that carries the module logger name,
so records from core.form_model, core.config and core.theme_manager can
be told apart:

    2026-10-19 14:02:11 [DEBUG] core.form_model: Password field: CLEAN -> INVALID (3 hints)

The console line is coloured by level when stdout is a terminal. The file
(log_YYYYMMDD.log under the user data directory) is plain and rotates at 10 MB.

Startup runs in two steps: setup_logging() before anything else, using
LOG_LEVEL from the process environment, then set_level() once Config has
read .env / settings.json.
"""
import logging
import logging.handlers
import os
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Optional

from core.paths import logs_path

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_GLOB = "log_*.log*"

LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",     # cyan
    logging.INFO: "\033[32m",      # green
    logging.WARNING: "\033[33m",   # yellow
    logging.ERROR: "\033[31m",     # red
    logging.CRITICAL: "\033[35m",  # magenta
}
RESET = "\033[0m"


class ColoredFormatter(logging.Formatter):
    """Wraps the whole formatted line in the colour of its level."""

    def format(self, record):
        line = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        return f"{color}{line}{RESET}" if color else line


def parse_level(name: Optional[str]) -> int:
    """'debug' / 'WARNING' / ... → logging level; anything unknown → INFO."""
    level = logging.getLevelName(str(name or "").strip().upper())
    return level if isinstance(level, int) else logging.INFO


class LoggingConfig:

    MAX_BYTES = 10 * 1024 * 1024
    BACKUP_COUNT = 5

    @staticmethod
    def setup_logging(
            log_level: Optional[str] = None,
            log_dir: Optional[str] = None,
            enable_console: bool = True,
    ) -> Path:
        """Install the console and file handlers on the root logger; returns the log file."""
        level = parse_level(log_level or os.getenv("LOG_LEVEL"))
        log_path = Path(log_dir) if log_dir else logs_path()
        log_path.mkdir(parents=True, exist_ok=True)

        root = logging.getLogger()
        root.setLevel(level)
        root.handlers.clear()

        if enable_console and sys.stdout is not None:
            console = logging.StreamHandler(sys.stdout)
            # DEBUG only ever goes to the file
            console.setLevel(logging.INFO)
            is_tty = hasattr(sys.stdout, "isatty") and sys.stdout.isatty()
            formatter_cls = ColoredFormatter if is_tty else logging.Formatter
            console.setFormatter(formatter_cls(LOG_FORMAT, datefmt=DATE_FORMAT))
            root.addHandler(console)

        log_file = log_path / f"log_{datetime.now():%Y%m%d}.log"
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=LoggingConfig.MAX_BYTES,
            backupCount=LoggingConfig.BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(file_handler)

        logger.info(f"Logging to {log_file} at {logging.getLevelName(level)}")
        return log_file

    @staticmethod
    def set_level(log_level: Optional[str]) -> int:
        """Re-level the root logger once the final LOG_LEVEL is known."""
        level = parse_level(log_level)
        root = logging.getLogger()
        if root.level != level:
            root.setLevel(level)
            logger.info(f"Log level set to {logging.getLevelName(level)}")
        return level

    @staticmethod
    def cleanup_old_logs(log_dir: Optional[str] = None, days_to_keep: int = 30) -> int:
        """Delete log files not written to for ``days_to_keep`` days; returns the count."""
        log_path = Path(log_dir) if log_dir else logs_path()
        if not log_path.is_dir():
            return 0

        cutoff = time.time() - days_to_keep * 24 * 60 * 60
        removed = 0
        for log_file in log_path.glob(LOG_FILE_GLOB):
            try:
                if log_file.stat().st_mtime < cutoff:
                    log_file.unlink()
                    removed += 1
            except OSError as e:
                logger.warning(f"Could not remove old log {log_file}: {e}")

        if removed:
            logger.info(f"Removed {removed} old log file(s)")
        return removed
