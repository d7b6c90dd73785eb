"""Tests for the text screens."""

from __future__ import annotations

from datetime import date

import pytest

from grappleflow.models import ExperimentResult, LabEntryType
from grappleflow.views import RENDERERS, View, render_challenge, render_view


def test_every_view_has_a_renderer():
    assert set(RENDERERS) == set(View)


@pytest.mark.parametrize("name", ["dashboard", "LOG", " lab ", "coach", "stats"])
def test_parse_view(name):
    assert View.parse(name).value == name.strip().lower()


def test_parse_unknown_view():
    with pytest.raises(ValueError, match="Unknown view"):
        View.parse("settings")


@pytest.mark.parametrize("view", list(View))
def test_every_view_renders_when_empty(state, view):
    assert render_view(view, state)


def test_dashboard_shows_week_and_last_session(state):
    state.add_session(notes="Worked half guard", date=date(2026, 3, 13))
    state.add_session(date=date(2026, 3, 1))
    text = render_view(View.DASHBOARD, state)
    assert "Total sessions: 2" in text
    assert "This week: 1/4" in text
    assert "25%" in text
    assert "2026-03-13" in text
    assert "Worked half guard" in text


def test_stats_view(state):
    state.add_session(duration_minutes=90, intensity=7, date=date(2026, 3, 12))
    state.add_session(duration_minutes=45, intensity=9, date=date(2026, 3, 13))
    text = render_view(View.STATS, state)
    assert "Avg intensity:  8.0" in text
    assert "Total mat time: 2h 15m" in text
    assert "3/12" in text and "3/13" in text
    assert "Gi" in text


def test_lab_view_flags_untested_idea(state, clock):
    challenge = state.create_challenge("Closed guard", "Passing")
    clock.advance(minutes=1)
    state.add_entry(challenge.id, LabEntryType.HYPOTHESIS, "Stand up to break")
    text = render_view(View.LAB, state)
    assert "Closed guard" in text
    assert "1 notes, 0 tests" in text
    assert "Untested Idea" in text

    clock.advance(minutes=1)
    state.add_entry(challenge.id, LabEntryType.EXPERIMENT, "Stood up", ExperimentResult.SUCCESS)
    assert "Untested Idea" not in render_view(View.LAB, state)


def test_challenge_notebook(state, clock):
    challenge = state.create_challenge("Closed guard")
    assert "Lab notebook is empty" in render_challenge(state, challenge.id)
    clock.advance(minutes=1)
    state.add_entry(challenge.id, LabEntryType.EXPERIMENT, "Stood up", ExperimentResult.FAILURE)
    text = render_challenge(state, challenge.id)
    assert "EXPERIMENT [Failure]" in text
    assert "Stood up" in text


def test_coach_view_shows_greeting(state):
    assert "Coach G: Oss!" in render_view(View.COACH, state)
