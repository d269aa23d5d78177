"""Timestamp helpers."""

import time
from datetime import datetime


def now_exact() -> str:
    """Current local time as an ISO 8601 string with microseconds."""
    return datetime.now().isoformat(timespec="microseconds")


def now_ms(clock=time.time) -> int:
    """Current epoch time in milliseconds, read from ``clock`` (seconds)."""
    return int(clock() * 1000)


def format_epoch_ms(timestamp_ms: int, relative: bool = False, now: float = None) -> str:
    """
    Format an epoch-milliseconds timestamp for display.

    Args:
        timestamp_ms: Milliseconds since the epoch
        relative: If True, show compact relative time (e.g., "2h ago")
        now: Reference time in epoch seconds for relative output (default: current time)

    Returns:
        Human-readable timestamp

    Examples:
        format_epoch_ms(1760868000000)
        # "2025-10-19 10:00:00"

        format_epoch_ms(1760868000000, relative=True, now=1760875200)
        # "2h ago"
    """
    dt = datetime.fromtimestamp(timestamp_ms / 1000)
    if not relative:
        return dt.strftime("%Y-%m-%d %H:%M:%S")

    reference = datetime.fromtimestamp(now if now is not None else time.time())
    return _format_relative_time(reference - dt)


def _format_relative_time(diff) -> str:
    """Format a timedelta compactly: 30s, 15m, 2h or 5d."""
    if diff.total_seconds() < 0:
        diff = -diff
        suffix = "from now"
    else:
        suffix = "ago"

    seconds = int(diff.total_seconds())
    minutes = seconds // 60
    hours = minutes // 60

    if seconds < 60:
        return f"{seconds}s {suffix}"
    elif minutes < 60:
        return f"{minutes}m {suffix}"
    elif hours < 24:
        return f"{hours}h {suffix}"
    else:
        return f"{diff.days}d {suffix}"
