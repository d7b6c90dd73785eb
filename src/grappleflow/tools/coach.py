"""MCP tools for talking to Coach G."""

from typing import Any

from grappleflow.state import AppState


def register_coach_tools(mcp, state: AppState):
    """Register coaching MCP tools."""

    @mcp.tool()
    async def ask_coach(message: str) -> dict[str, Any]:
        """
        Send a message to Coach G.

        Messages asking to "analyze" training, or mentioning "my training" or
        "progress", get a review of the recent sessions. Anything else is
        answered as a technical question, using the latest session notes as
        context.

        Args:
            message: The question or request

        Returns:
            Dictionary containing Coach G's reply
        """
        try:
            reply = await state.send_coach_message(message)
            return {"data": {"reply": reply.text}}
        except Exception as e:
            return {"error": str(e)}

    @mcp.tool()
    def get_chat_history(limit: int = 20) -> dict[str, Any]:
        """
        Get the most recent messages of the conversation with Coach G.

        Args:
            limit: Maximum number of messages to return (default: 20)

        Returns:
            Dictionary containing messages, oldest first
        """
        messages = state.chat[-limit:] if limit > 0 else []
        return {"data": {"messages": [m.model_dump(mode="json") for m in messages]}}

    @mcp.tool()
    async def suggest_drills(position: str) -> dict[str, Any]:
        """
        Get three solo or partner drills for a position.

        Args:
            position: The position to improve, e.g. "closed guard"

        Returns:
            Dictionary containing the drill list
        """
        drills = await state.coach.suggest_drills(position)
        return {"data": {"position": position, "drills": drills}}
