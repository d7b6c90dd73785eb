"""MCP tools for the Lab Notebook."""

from typing import Any

from grappleflow.lab import has_untested_idea, summarize_challenge
from grappleflow.models import ChallengeStatus, ExperimentResult, LabEntryType
from grappleflow.state import AppState


def register_lab_tools(mcp, state: AppState):
    """Register Lab Notebook MCP tools."""

    @mcp.tool()
    def create_challenge(title: str, category: str = "Guard") -> dict[str, Any]:
        """
        Start a new challenge: a specific problem in the student's game.

        Args:
            title: The problem, e.g. "Can't pass closed guard"
            category: Guard, Passing, Takedown, Escape, Submission, Pinning or a custom one

        Returns:
            Dictionary with the created challenge
        """
        try:
            challenge = state.create_challenge(title, category)
            return {"data": {"created": True, "challenge": challenge.model_dump(mode="json")}}
        except Exception as e:
            return {"error": str(e)}

    @mcp.tool()
    def list_challenges() -> dict[str, Any]:
        """
        List all challenges, most recently updated first.

        Each summary includes note and test counts and whether the challenge
        has an untested hypothesis.

        Returns:
            Dictionary containing challenge summaries
        """
        summaries = [summarize_challenge(c, state.lab_entries) for c in state.list_challenges()]
        return {"data": {"challenges": summaries, "count": len(summaries)}}

    @mcp.tool()
    def get_challenge(challenge_id: str) -> dict[str, Any]:
        """
        Get a challenge with its notebook entries in chronological order.

        Args:
            challenge_id: The challenge ID

        Returns:
            Dictionary containing the challenge and its entries
        """
        challenge = state.get_challenge(challenge_id)
        if challenge is None:
            return {"error": f"Challenge not found: {challenge_id}"}
        entries = state.entries_for(challenge_id)
        return {
            "data": {
                "challenge": challenge.model_dump(mode="json"),
                "entries": [e.model_dump(mode="json") for e in entries],
                "untested_idea": has_untested_idea(entries),
                "insight_pending": state.is_insight_pending(challenge_id),
            }
        }

    @mcp.tool()
    def add_lab_entry(
        challenge_id: str,
        entry_type: str,
        content: str,
        result: str | None = None,
    ) -> dict[str, Any]:
        """
        Add an entry to a challenge's notebook.

        Args:
            challenge_id: The challenge ID
            entry_type: Observation, Hypothesis or Experiment. Analysis entries
                come from request_challenge_insight
            content: What was observed, proposed or tested
            result: For experiments only: Success, Failure or Inconclusive
                (default: Inconclusive)

        Returns:
            Dictionary with the saved entry
        """
        try:
            entry = state.add_entry(
                challenge_id,
                LabEntryType(entry_type),
                content,
                ExperimentResult(result) if result else None,
            )
            return {"data": {"saved": True, "entry": entry.model_dump(mode="json")}}
        except Exception as e:
            return {"error": str(e)}

    @mcp.tool()
    def set_challenge_status(challenge_id: str, status: str) -> dict[str, Any]:
        """
        Mark a challenge as Active, Solved or Shelved.

        Args:
            challenge_id: The challenge ID
            status: Active, Solved or Shelved

        Returns:
            Dictionary with the updated challenge
        """
        try:
            challenge = state.set_challenge_status(challenge_id, ChallengeStatus(status))
            return {"data": {"updated": True, "challenge": challenge.model_dump(mode="json")}}
        except Exception as e:
            return {"error": str(e)}

    @mcp.tool()
    def delete_challenge(challenge_id: str) -> dict[str, Any]:
        """
        Delete a challenge and all of its notebook entries.

        Args:
            challenge_id: The challenge ID

        Returns:
            Dictionary with deleted status
        """
        if not state.delete_challenge(challenge_id):
            return {"error": f"Challenge not found: {challenge_id}"}
        return {"data": {"deleted": True, "challenge_id": challenge_id}}

    @mcp.tool()
    async def request_challenge_insight(challenge_id: str) -> dict[str, Any]:
        """
        Ask Coach G to analyze a challenge and suggest the next step.

        The reply is saved to the notebook as an Analysis entry.

        Args:
            challenge_id: The challenge ID

        Returns:
            Dictionary with the new Analysis entry
        """
        try:
            entry = await state.request_insight(challenge_id)
        except Exception as e:
            return {"error": str(e)}
        if entry is None:
            return {"error": "An insight for this challenge is already in progress."}
        return {"data": {"saved": True, "entry": entry.model_dump(mode="json")}}
