"""Text screens for the five views of the app."""

from datetime import datetime
from enum import Enum
from typing import Callable, Optional

from grappleflow.lab import experiment_count, has_untested_idea
from grappleflow.models import ChatRole, LabEntryType
from grappleflow.state import AppState
from grappleflow.stats import (
    WEEKLY_GOAL,
    average_intensity,
    last_session,
    recent_activity,
    recent_sessions,
    total_mat_minutes,
    type_distribution,
    weekly_count,
    weekly_goal_progress,
)
from grappleflow.utils.formatting import format_average, format_mat_time, format_timestamp

RULE = "=" * 60
BAR_WIDTH = 20


class View(str, Enum):
    """The screens a user can navigate to."""

    DASHBOARD = "dashboard"
    LOG = "log"
    LAB = "lab"
    COACH = "coach"
    STATS = "stats"

    @classmethod
    def parse(cls, name: str) -> "View":
        try:
            return cls(name.strip().lower())
        except ValueError as err:
            choices = ", ".join(v.value for v in cls)
            raise ValueError(f"Unknown view: {name}. Expected one of: {choices}") from err


def _header(title: str) -> list[str]:
    return [RULE, title, RULE]


def _bar(fraction: float) -> str:
    filled = round(max(0.0, min(fraction, 1.0)) * BAR_WIDTH)
    return "#" * filled + "." * (BAR_WIDTH - filled)


def render_dashboard(state: AppState, now: datetime) -> str:
    sessions = state.sessions
    this_week = weekly_count(sessions, now)
    progress = weekly_goal_progress(this_week)

    lines = _header("GRAPPLEFLOW")
    lines.append(f"Total sessions: {len(sessions)}")
    lines.append(f"This week: {this_week}/{WEEKLY_GOAL}  [{_bar(progress / 100)}] {progress}%")
    lines.append("")

    latest = last_session(sessions)
    if latest is None:
        lines.append("No sessions yet. Log your first session with grappleflow-log.")
    else:
        lines.append("Last session:")
        lines.append(
            f"  {latest.date.isoformat()}  {latest.type.value}  {latest.duration_minutes} min  "
            f"intensity {latest.intensity}/10  mood {latest.mood.value}"
        )
        if latest.notes:
            lines.append(f'  "{latest.notes}"')
    return "\n".join(lines)


def render_log(state: AppState, now: datetime) -> str:
    lines = _header("TRAINING LOG")
    if not state.sessions:
        lines.append("No sessions logged.")
        return "\n".join(lines)

    for s in recent_sessions(state.sessions, len(state.sessions)):
        lines.append(
            f"[{s.id}] {s.date.isoformat()}  {s.type.value:<11} {s.duration_minutes:>4} min  "
            f"{s.rounds} rounds  intensity {s.intensity}/10  {s.mood.value}"
        )
        if s.techniques:
            lines.append(f"    Techniques: {', '.join(t.name for t in s.techniques)}")
        if s.notes:
            lines.append(f"    {s.notes}")
    return "\n".join(lines)


def render_stats(state: AppState, now: datetime) -> str:
    sessions = state.sessions
    lines = _header("STATS")
    if not sessions:
        lines.append("Not enough data yet. Log a few sessions to see stats.")
        return "\n".join(lines)

    lines.append(f"Avg intensity:  {format_average(average_intensity(sessions))}")
    lines.append(f"Total mat time: {format_mat_time(total_mat_minutes(sessions))}")
    lines.append("")

    lines.append("Recent activity:")
    activity = recent_activity(sessions)
    peak = max((n for _, n in activity), default=1)
    for label, count in activity:
        lines.append(f"  {label:>5}  {_bar(count / peak)} {count}")
    lines.append("")

    lines.append("Session types:")
    distribution = type_distribution(sessions)
    for session_type, count in distribution.items():
        pct = round(count / len(sessions) * 100)
        lines.append(f"  {session_type.value:<12} {count:>3}  ({pct}%)")
    return "\n".join(lines)


def render_lab(state: AppState, now: datetime) -> str:
    lines = _header("THE LAB")
    challenges = state.list_challenges()
    if not challenges:
        lines.append("No active experiments. Identify a friction point in your game to start.")
        return "\n".join(lines)

    for c in challenges:
        entries = state.entries_for(c.id)
        flag = "  * Untested Idea" if has_untested_idea(entries) else ""
        pending = "  (Coach G is thinking...)" if state.is_insight_pending(c.id) else ""
        lines.append(f"[{c.id}] {c.title}  <{c.category}>  {c.status.value}")
        lines.append(
            f"    {len(entries)} notes, {experiment_count(entries)} tests, "
            f"last update {format_timestamp(c.last_updated)}{flag}{pending}"
        )
    return "\n".join(lines)


def render_challenge(state: AppState, challenge_id: str) -> str:
    """Full notebook for a single challenge, oldest entry first."""
    challenge = state.require_challenge(challenge_id)
    entries = state.entries_for(challenge_id)

    lines = _header(f"{challenge.title}  <{challenge.category}>  {challenge.status.value}")
    if not entries:
        lines.append("Lab notebook is empty. Log an observation to start.")
    for e in entries:
        label = "Coach G Analysis" if e.type == LabEntryType.ANALYSIS else e.type.value
        result = f" [{e.result.value}]" if e.result else ""
        lines.append(f"{format_timestamp(e.date)}  {label.upper()}{result}")
        lines.append(f"    {e.content}")
    return "\n".join(lines)


def render_coach(state: AppState, now: datetime) -> str:
    lines = _header("COACH G")
    for message in state.chat:
        speaker = "You" if message.role == ChatRole.USER else "Coach G"
        lines.append(f"{speaker}: {message.text}")
    return "\n".join(lines)


RENDERERS: dict[View, Callable[[AppState, datetime], str]] = {
    View.DASHBOARD: render_dashboard,
    View.LOG: render_log,
    View.LAB: render_lab,
    View.COACH: render_coach,
    View.STATS: render_stats,
}


def render_view(view: View, state: AppState, now: Optional[datetime] = None) -> str:
    """Render one screen as plain text."""
    return RENDERERS[view](state, now or state.now())
