"""Tests for the pydantic record models."""

from __future__ import annotations

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from grappleflow.models import (
    Challenge,
    ExperimentResult,
    LabEntry,
    LabEntryType,
    Mood,
    SessionType,
    TrainingSession,
)


def _session(**overrides):
    fields = dict(
        id="s1",
        date=date(2026, 3, 1),
        duration_minutes=60,
        type=SessionType.NOGI,
        rounds=4,
        mood=Mood.HARD,
        intensity=8,
    )
    fields.update(overrides)
    return TrainingSession(**fields)


def test_session_accepts_display_values():
    session = TrainingSession.model_validate(
        {
            "id": "s1",
            "date": "2026-03-01",
            "duration_minutes": 60,
            "type": "Open Mat",
            "rounds": 0,
            "mood": "Injured",
            "intensity": 1,
        }
    )
    assert session.type is SessionType.OPEN_MAT
    assert session.mood is Mood.INJURED
    assert session.notes == ""
    assert session.techniques == []


@pytest.mark.parametrize("intensity", [0, 11])
def test_session_rejects_intensity_out_of_range(intensity):
    with pytest.raises(ValidationError):
        _session(intensity=intensity)


def test_session_rejects_non_positive_duration():
    with pytest.raises(ValidationError):
        _session(duration_minutes=0)


def test_session_rejects_negative_rounds():
    with pytest.raises(ValidationError):
        _session(rounds=-1)


def test_session_rejects_unknown_type():
    with pytest.raises(ValidationError):
        _session(type="Judo")


def test_experiment_entry_may_carry_result():
    entry = LabEntry(
        id="e1",
        challenge_id="c1",
        date=datetime(2026, 3, 1, 10),
        type=LabEntryType.EXPERIMENT,
        content="Tried the knee slice",
        result=ExperimentResult.FAILURE,
    )
    assert entry.result is ExperimentResult.FAILURE


def test_result_rejected_on_non_experiment():
    with pytest.raises(ValidationError):
        LabEntry(
            id="e1",
            challenge_id="c1",
            date=datetime(2026, 3, 1, 10),
            type=LabEntryType.HYPOTHESIS,
            content="Use an underhook",
            result=ExperimentResult.SUCCESS,
        )


def test_challenge_accepts_custom_category():
    now = datetime(2026, 3, 1, 10)
    challenge = Challenge(
        id="c1", title="Leg lock entries", category="Leg Locks", created_at=now, last_updated=now
    )
    assert challenge.category == "Leg Locks"
    assert challenge.status.value == "Active"


def test_challenge_rejects_empty_title():
    now = datetime(2026, 3, 1, 10)
    with pytest.raises(ValidationError):
        Challenge(id="c1", title="", created_at=now, last_updated=now)
