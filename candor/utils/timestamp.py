"""Timestamps for chat messages and their display in the terminal."""

from datetime import datetime
from typing import Optional

# (unit seconds, suffix), largest first
_RELATIVE_UNITS = (
    (86400, "d"),
    (3600, "h"),
    (60, "m"),
    (1, "s"),
)


def now_exact() -> str:
    """Current local time as an ISO 8601 string with microseconds."""
    return datetime.now().isoformat()


def format_timestamp(
    iso_timestamp: str, relative: bool = False, now: Optional[datetime] = None
) -> str:
    """
    Render a message timestamp for display.

    Absolute form is "YYYY-MM-DD HH:MM:SS"; relative form is compact ("3m ago",
    "2d ago"). Unparseable input comes back unchanged so a bad stamp never hides
    the message it belongs to.

    Args:
        iso_timestamp: ISO 8601 string as produced by now_exact()
        relative: Show elapsed time instead of the wall-clock time
        now: Reference time for relative output (default: current time)
    """
    try:
        stamp = datetime.fromisoformat(iso_timestamp)
    except (ValueError, TypeError):
        return iso_timestamp

    if not relative:
        return stamp.strftime("%Y-%m-%d %H:%M:%S")

    elapsed = int(((now or datetime.now()) - stamp).total_seconds())
    suffix = "ago" if elapsed >= 0 else "from now"
    elapsed = abs(elapsed)

    for unit_seconds, unit in _RELATIVE_UNITS:
        if elapsed >= unit_seconds:
            return f"{elapsed // unit_seconds}{unit} {suffix}"
    return f"0s {suffix}"
