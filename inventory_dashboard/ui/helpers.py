from collections import deque
from pathlib import Path

import streamlit as st

from inventory_dashboard.core.logging import LOG_FILE

_NOTICE_ICONS = {"success": "✅", "warning": "⚠️"}


def read_recent_logs(limit: int = 100, log_file: str | Path = LOG_FILE) -> str:
    """Return the last ``limit`` lines of the dashboard log for the sidebar.

    Only ``limit`` lines are held in memory while the file is scanned. A
    missing or unreadable file yields an empty string so the sidebar can show
    its own placeholder.
    """
    try:
        with Path(log_file).open("r", encoding="utf-8", errors="replace") as fh:
            return "".join(deque(fh, maxlen=limit))
    except OSError:
        return ""


def notify(msg: str, level: str = "success") -> None:
    """Show a transient toast for a completed action."""
    st.toast(msg, icon=_NOTICE_ICONS.get(level))


def show_success(msg: str) -> None:
    notify(msg, "success")


def show_warning(msg: str) -> None:
    notify(msg, "warning")
