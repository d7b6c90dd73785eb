"""MCP tools for GrappleFlow."""

from grappleflow.tools.sessions import register_session_tools
from grappleflow.tools.stats import register_stats_tools
from grappleflow.tools.lab import register_lab_tools
from grappleflow.tools.coach import register_coach_tools

__all__ = [
    "register_session_tools",
    "register_stats_tools",
    "register_lab_tools",
    "register_coach_tools",
    "register_all_tools",
]


def register_all_tools(mcp, state):
    """Register all MCP tools with the server."""
    register_session_tools(mcp, state)
    register_stats_tools(mcp, state)
    register_lab_tools(mcp, state)
    register_coach_tools(mcp, state)
