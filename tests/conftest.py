"""Shared fixtures for the GrappleFlow tests."""

from __future__ import annotations

import asyncio
from datetime import date, datetime, timedelta
from pathlib import Path

import pytest

from grappleflow.models import Mood, SessionType, TrainingSession
from grappleflow.state import AppState
from grappleflow.storage import CollectionStorage

FIXED_NOW = datetime(2026, 3, 14, 18, 30)


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, start: datetime = FIXED_NOW):
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> datetime:
        self.current += timedelta(**kwargs)
        return self.current


class FakeCoach:
    """Stands in for Coach; records calls and can hold replies until released."""

    def __init__(self, reply: str = "Try a knee-cut variation."):
        self.reply = reply
        self.calls: list[tuple[str, tuple]] = []
        self.release: asyncio.Event | None = None
        self.closed = False

    async def _respond(self, name: str, *args) -> str:
        self.calls.append((name, args))
        if self.release is not None:
            await self.release.wait()
        return self.reply

    async def analyze_training_patterns(self, sessions):
        return await self._respond("analyze", list(sessions))

    async def get_technical_advice(self, query, context=None):
        return await self._respond("advice", query, context)

    async def generate_challenge_insight(self, challenge, entries):
        return await self._respond("insight", challenge, list(entries))

    async def suggest_drills(self, position):
        self.calls.append(("drills", (position,)))
        return ["Hip escape", "Knee shield frame", "Granby roll"]

    async def close(self):
        self.closed = True


class FakeMCP:
    """Collects functions registered with @mcp.tool()."""

    def __init__(self):
        self.tools: dict = {}

    def tool(self):
        def decorator(fn):
            self.tools[fn.__name__] = fn
            return fn

        return decorator


def make_session(
    session_id: str = "s1",
    day: date = date(2026, 3, 12),
    duration: int = 90,
    session_type: SessionType = SessionType.GI,
    intensity: int = 7,
    notes: str = "",
) -> TrainingSession:
    return TrainingSession(
        id=session_id,
        date=day,
        duration_minutes=duration,
        type=session_type,
        rounds=5,
        notes=notes,
        mood=Mood.GOOD,
        intensity=intensity,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def storage(tmp_path: Path) -> CollectionStorage:
    return CollectionStorage(tmp_path / "data")


@pytest.fixture()
def coach() -> FakeCoach:
    return FakeCoach()


@pytest.fixture()
def state(storage, coach, clock) -> AppState:
    return AppState.load(storage, coach=coach, clock=clock)
