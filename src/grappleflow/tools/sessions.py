"""MCP tools for the training log."""

import uuid
from typing import Any

from grappleflow.models import Mood, SessionType, Technique
from grappleflow.models.training import (
    DEFAULT_DURATION_MINUTES,
    DEFAULT_INTENSITY,
    DEFAULT_ROUNDS,
)
from grappleflow.state import AppState
from grappleflow.stats import recent_sessions
from grappleflow.utils.dates import parse_date


def parse_techniques(names: str) -> list[Technique]:
    """Turn a comma-separated list of technique names into Technique records."""
    return [
        Technique(id=str(uuid.uuid4())[:8], name=name.strip())
        for name in names.split(",")
        if name.strip()
    ]


def register_session_tools(mcp, state: AppState):
    """Register training log MCP tools."""

    @mcp.tool()
    def log_session(
        duration_minutes: int = DEFAULT_DURATION_MINUTES,
        session_type: str = SessionType.GI.value,
        rounds: int = DEFAULT_ROUNDS,
        notes: str = "",
        mood: str = Mood.GOOD.value,
        intensity: int = DEFAULT_INTENSITY,
        date: str | None = None,
        techniques: str = "",
    ) -> dict[str, Any]:
        """
        Log a training session.

        Args:
            duration_minutes: Length of the session in minutes (default: 90)
            session_type: One of Gi, No-Gi, Open Mat, Seminar, Competition
            rounds: Number of sparring rounds (default: 5)
            notes: Free-form notes about the session
            mood: One of Great, Good, Neutral, Hard, Injured
            intensity: Intensity from 1 to 10 (default: 7)
            date: Session date in ISO format (YYYY-MM-DD); defaults to today
            techniques: Comma-separated technique names worked on

        Returns:
            Dictionary with the saved session
        """
        try:
            session = state.add_session(
                duration_minutes=duration_minutes,
                type=SessionType(session_type),
                rounds=rounds,
                notes=notes,
                mood=Mood(mood),
                intensity=intensity,
                date=parse_date(date) if date else None,
                techniques=parse_techniques(techniques),
            )
            return {"data": {"saved": True, "session": session.model_dump(mode="json")}}
        except Exception as e:
            return {"error": str(e)}

    @mcp.tool()
    def list_sessions(limit: int = 20) -> dict[str, Any]:
        """
        List logged sessions, most recent first.

        Args:
            limit: Maximum number of sessions to return (default: 20)

        Returns:
            Dictionary containing the sessions and the total count
        """
        sessions = recent_sessions(state.sessions, limit)
        return {
            "data": {
                "sessions": [s.model_dump(mode="json") for s in sessions],
                "count": len(state.sessions),
            }
        }

    @mcp.tool()
    def delete_session(session_id: str) -> dict[str, Any]:
        """
        Delete a logged session.

        Args:
            session_id: ID of the session to delete

        Returns:
            Dictionary with deleted status
        """
        if not state.delete_session(session_id):
            return {"error": f"Session not found: {session_id}"}
        return {"data": {"deleted": True, "session_id": session_id}}
