"""CLI tools for GrappleFlow."""

from grappleflow.cli.ask_coach import main as ask_coach_main
from grappleflow.cli.lab_notebook import main as lab_notebook_main
from grappleflow.cli.log_session import main as log_session_main
from grappleflow.cli.plot_stats import main as plot_stats_main
from grappleflow.cli.show_view import main as show_view_main

__all__ = [
    "ask_coach_main",
    "lab_notebook_main",
    "log_session_main",
    "plot_stats_main",
    "show_view_main",
]
