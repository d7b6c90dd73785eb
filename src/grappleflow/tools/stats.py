"""MCP tools for statistics and screen rendering."""

from typing import Any

from grappleflow.state import AppState
from grappleflow.stats import build_stats_summary
from grappleflow.views import View, render_view


def register_stats_tools(mcp, state: AppState):
    """Register statistics MCP tools."""

    @mcp.tool()
    def get_training_stats() -> dict[str, Any]:
        """
        Get statistics over all logged sessions.

        Includes sessions this week (with progress toward the weekly goal),
        average intensity, total mat time, session type distribution and
        recent daily activity.

        Returns:
            Dictionary containing the statistics
        """
        try:
            return {"data": build_stats_summary(state.sessions, state.now())}
        except Exception as e:
            return {"error": str(e)}

    @mcp.tool()
    def show_screen(view: str = View.DASHBOARD.value) -> dict[str, Any]:
        """
        Render one of the app screens as plain text.

        Args:
            view: One of dashboard, log, lab, coach, stats (default: dashboard)

        Returns:
            Dictionary containing the rendered text
        """
        try:
            screen = View.parse(view)
            return {"data": {"view": screen.value, "text": render_view(screen, state)}}
        except Exception as e:
            return {"error": str(e)}
