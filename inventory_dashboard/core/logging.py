"""Logging setup for the dashboard process.

Records go to the console and to ``LOG_FILE``, which rotates at
``LOG_MAX_BYTES`` and keeps ``LOG_BACKUP_COUNT`` numbered backups. Backups
older than ``LOG_RETENTION_DAYS`` are deleted when logging is configured, so
a long-lived Streamlit server does not keep stale remote-call failures around.
The sidebar's Recent Logs panel reads the same file.
"""

import logging
import os
from datetime import datetime, timedelta
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILE = os.getenv("LOG_FILE", "inventory_dashboard.log")
LOG_MAX_BYTES = int(os.getenv("LOG_MAX_BYTES", "1000000"))
LOG_BACKUP_COUNT = int(os.getenv("LOG_BACKUP_COUNT", "3"))
LOG_RETENTION_DAYS = int(os.getenv("LOG_RETENTION_DAYS", "30"))

_configured = False


def configure_logging() -> None:
    """Attach the console and rotating file handlers to the root logger once.

    ``LOG_LEVEL`` selects the level; unknown names fall back to ``INFO``.
    """

    global _configured
    if _configured:
        return

    level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT)
    root = logging.getLogger()
    root.setLevel(level)

    handlers = [
        RotatingFileHandler(
            LOG_FILE, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT
        ),
        logging.StreamHandler(),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    _configured = True
    removed = purge_old_logs(LOG_FILE, LOG_RETENTION_DAYS)
    if removed:
        root.info("Removed %d expired log backups", removed)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def flush_logs() -> None:
    """Flush pending records, then empty the active log file (backups stay)."""

    for handler in logging.getLogger().handlers:
        handler.flush()
    Path(LOG_FILE).write_text("")


def purge_old_logs(log_file: str, retention_days: int) -> int:
    """Delete rotated backups of ``log_file`` older than ``retention_days``.

    Only ``<log_file>.<n>`` backups are considered; the active file is never
    touched. A non-positive retention keeps everything. Returns the number of
    files removed.
    """
    if retention_days <= 0:
        return 0

    active = Path(log_file).resolve()
    cutoff = (datetime.now() - timedelta(days=retention_days)).timestamp()
    removed = 0
    for backup in active.parent.glob(f"{active.name}.*"):
        if not backup.suffix[1:].isdigit():
            continue
        try:
            expired = backup.stat().st_mtime < cutoff
        except FileNotFoundError:
            continue
        if expired:
            backup.unlink(missing_ok=True)
            removed += 1
    return removed
