"""Statistics derived from the training log.

Everything here is a pure function of the session list. Nothing is cached;
callers recompute on every render.
"""

from collections import Counter
from datetime import date, datetime, timedelta
from typing import Any, Optional, Sequence

from grappleflow.models import SessionType, TrainingSession
from grappleflow.utils.dates import day_label, start_of_day
from grappleflow.utils.formatting import format_average, format_mat_time, split_minutes

WEEKLY_GOAL = 4  # Sessions per week shown as a full progress bar
RECENT_ACTIVITY_DAYS = 7


def weekly_count(sessions: Sequence[TrainingSession], now: datetime) -> int:
    """Count sessions dated strictly after the instant seven days before now."""
    cutoff = now - timedelta(days=7)
    return sum(1 for s in sessions if start_of_day(s.date) > cutoff)


def weekly_goal_progress(count: int, goal: int = WEEKLY_GOAL) -> int:
    """Percentage of the weekly goal reached, capped at 100."""
    if goal <= 0:
        return 100
    return min(round(count / goal * 100), 100)


def average_intensity(sessions: Sequence[TrainingSession]) -> Optional[float]:
    """Mean intensity rounded to one decimal, or None when there are no sessions."""
    if not sessions:
        return None
    return round(sum(s.intensity for s in sessions) / len(sessions), 1)


def total_mat_minutes(sessions: Sequence[TrainingSession]) -> int:
    return sum(s.duration_minutes for s in sessions)


def total_mat_time(sessions: Sequence[TrainingSession]) -> tuple[int, int]:
    """Total duration as (hours, remainder minutes)."""
    return split_minutes(total_mat_minutes(sessions))


def type_distribution(sessions: Sequence[TrainingSession]) -> dict[SessionType, int]:
    """Session counts per type, in order of first appearance."""
    return dict(Counter(s.type for s in sessions))


def recent_activity(
    sessions: Sequence[TrainingSession], days: int = RECENT_ACTIVITY_DAYS
) -> list[tuple[str, int]]:
    """
    Session counts for the most recent distinct training days.

    Sessions are grouped by full calendar date, so the same month/day in
    different years stays separate. Only the `days` latest dates are kept,
    returned oldest first with M/D labels.

    Args:
        sessions: Sessions to aggregate
        days: Number of distinct dates to keep

    Returns:
        List of (label, count) pairs
    """
    per_day: Counter[date] = Counter(s.date for s in sessions)
    latest = sorted(per_day)[-days:] if days > 0 else []
    return [(day_label(d), per_day[d]) for d in latest]


def recent_sessions(sessions: Sequence[TrainingSession], limit: int) -> list[TrainingSession]:
    """The `limit` most recent sessions, newest first."""
    return sorted(sessions, key=lambda s: s.date, reverse=True)[:limit]


def last_session(sessions: Sequence[TrainingSession]) -> Optional[TrainingSession]:
    recent = recent_sessions(sessions, 1)
    return recent[0] if recent else None


def build_stats_summary(sessions: Sequence[TrainingSession], now: datetime) -> dict[str, Any]:
    """Bundle all derived statistics into a JSON-friendly dictionary."""
    this_week = weekly_count(sessions, now)
    hours, minutes = total_mat_time(sessions)
    avg = average_intensity(sessions)
    latest = last_session(sessions)

    return {
        "total_sessions": len(sessions),
        "sessions_this_week": this_week,
        "weekly_goal": WEEKLY_GOAL,
        "weekly_goal_progress_pct": weekly_goal_progress(this_week),
        "avg_intensity": avg,
        "avg_intensity_display": format_average(avg),
        "total_mat_time": {"hours": hours, "minutes": minutes},
        "total_mat_time_display": format_mat_time(total_mat_minutes(sessions)),
        "type_distribution": {t.value: n for t, n in type_distribution(sessions).items()},
        "recent_activity": [{"day": label, "sessions": n} for label, n in recent_activity(sessions)],
        "last_session": latest.model_dump(mode="json") if latest else None,
    }
