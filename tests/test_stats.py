"""Tests for the training statistics."""

from __future__ import annotations

from datetime import date, datetime, timedelta

from conftest import make_session
from grappleflow.models import SessionType
from grappleflow.stats import (
    average_intensity,
    build_stats_summary,
    last_session,
    recent_activity,
    recent_sessions,
    total_mat_time,
    type_distribution,
    weekly_count,
    weekly_goal_progress,
)
from grappleflow.utils.formatting import format_average, format_mat_time

NOW = datetime(2026, 3, 14, 18, 30)


def test_average_intensity():
    sessions = [make_session(f"s{i}", intensity=v) for i, v in enumerate([7, 9, 5])]
    assert average_intensity(sessions) == 7.0


def test_average_intensity_rounds_to_one_decimal():
    sessions = [make_session(f"s{i}", intensity=v) for i, v in enumerate([7, 8, 8])]
    assert average_intensity(sessions) == 7.7


def test_average_intensity_no_data():
    assert average_intensity([]) is None
    assert format_average(None) == "N/A"


def test_total_mat_time():
    sessions = [make_session("a", duration=90), make_session("b", duration=45)]
    assert total_mat_time(sessions) == (2, 15)
    assert format_mat_time(135) == "2h 15m"


def test_weekly_count_excludes_older_than_seven_days():
    sessions = [
        make_session("old", day=(NOW - timedelta(days=8)).date()),
        make_session("new", day=(NOW - timedelta(days=2)).date()),
    ]
    assert weekly_count(sessions, NOW) == 1


def test_weekly_count_cutoff_is_strict():
    cutoff_day = date(2026, 3, 7)
    sessions = [make_session("edge", day=cutoff_day)]
    # Midnight on the 7th is exactly seven days before midnight on the 14th
    assert weekly_count(sessions, datetime(2026, 3, 14)) == 0
    assert weekly_count(sessions, datetime(2026, 3, 13, 23, 59)) == 1


def test_weekly_goal_progress_caps_at_100():
    assert weekly_goal_progress(2) == 50
    assert weekly_goal_progress(6) == 100


def test_type_distribution():
    sessions = [
        make_session("a", session_type=SessionType.NOGI),
        make_session("b", session_type=SessionType.GI),
        make_session("c", session_type=SessionType.NOGI),
    ]
    assert type_distribution(sessions) == {SessionType.NOGI: 2, SessionType.GI: 1}
    assert list(type_distribution(sessions)) == [SessionType.NOGI, SessionType.GI]


def test_recent_activity_keeps_latest_days_oldest_first():
    days = [date(2026, 3, d) for d in range(1, 11)]
    sessions = [make_session(f"s{i}", day=d) for i, d in enumerate(days)]
    sessions.append(make_session("extra", day=date(2026, 3, 10)))
    activity = recent_activity(sessions)
    assert [label for label, _ in activity] == ["3/4", "3/5", "3/6", "3/7", "3/8", "3/9", "3/10"]
    assert activity[-1] == ("3/10", 2)


def test_recent_activity_keeps_years_apart():
    sessions = [
        make_session("a", day=date(2025, 3, 10)),
        make_session("b", day=date(2026, 3, 10)),
    ]
    assert recent_activity(sessions) == [("3/10", 1), ("3/10", 1)]


def test_recent_activity_ignores_insertion_order():
    sessions = [
        make_session("new", day=date(2026, 3, 12)),
        make_session("old", day=date(2025, 1, 1)),
    ]
    assert recent_activity(sessions, days=1) == [("3/12", 1)]


def test_recent_and_last_session():
    sessions = [
        make_session("mid", day=date(2026, 3, 5)),
        make_session("latest", day=date(2026, 3, 9)),
        make_session("first", day=date(2026, 3, 1)),
    ]
    assert [s.id for s in recent_sessions(sessions, 2)] == ["latest", "mid"]
    assert last_session(sessions).id == "latest"
    assert last_session([]) is None


def test_build_stats_summary():
    sessions = [
        make_session("a", day=date(2026, 3, 12), duration=90, intensity=7),
        make_session("b", day=date(2026, 3, 1), duration=45, intensity=9, session_type=SessionType.NOGI),
    ]
    summary = build_stats_summary(sessions, NOW)
    assert summary["total_sessions"] == 2
    assert summary["sessions_this_week"] == 1
    assert summary["weekly_goal_progress_pct"] == 25
    assert summary["avg_intensity"] == 8.0
    assert summary["total_mat_time_display"] == "2h 15m"
    assert summary["type_distribution"] == {"Gi": 1, "No-Gi": 1}
    assert summary["last_session"]["id"] == "a"


def test_build_stats_summary_empty():
    summary = build_stats_summary([], NOW)
    assert summary["avg_intensity"] is None
    assert summary["avg_intensity_display"] == "N/A"
    assert summary["recent_activity"] == []
    assert summary["last_session"] is None
