"""Formatting utilities for mat time and averages."""

from datetime import datetime
from typing import Optional


def split_minutes(total_minutes: int) -> tuple[int, int]:
    """Split a number of minutes into (hours, remainder minutes)."""
    return total_minutes // 60, total_minutes % 60


def format_mat_time(total_minutes: int) -> str:
    """Render minutes as hours and minutes (e.g. 135 -> '2h 15m')."""
    hours, minutes = split_minutes(total_minutes)
    return f"{hours}h {minutes}m"


def format_average(value: Optional[float]) -> str:
    """Render a one-decimal average, or 'N/A' when there is no data."""
    if value is None:
        return "N/A"
    return f"{value:.1f}"


def format_timestamp(dt: datetime) -> str:
    """Render a timestamp the way notebook entries are listed."""
    return dt.strftime("%Y-%m-%d %H:%M")
