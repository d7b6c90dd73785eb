#!/usr/bin/env python3
"""
Print one of the GrappleFlow screens.

Screens: dashboard, log, lab, coach, stats.
"""

import argparse

from grappleflow.config import configure_logging, load_settings
from grappleflow.server import build_state
from grappleflow.views import View, render_view


def main() -> int:
    """Render the requested screen to stdout."""
    parser = argparse.ArgumentParser(description="Show a GrappleFlow screen")
    parser.add_argument(
        "view",
        nargs="?",
        default=View.DASHBOARD.value,
        help=f"Screen to show: {', '.join(v.value for v in View)} (default: dashboard)",
    )
    parser.add_argument(
        "--env-file",
        help="Path to .env file with GrappleFlow settings",
    )

    args = parser.parse_args()

    try:
        view = View.parse(args.view)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    settings = load_settings(args.env_file)
    configure_logging(settings)
    state = build_state(settings)

    print(render_view(view, state))
    return 0


if __name__ == "__main__":
    exit(main())
