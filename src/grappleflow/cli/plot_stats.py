#!/usr/bin/env python3
"""
Save training charts as a PNG: sessions per recent training day and the
session type distribution.
"""

import argparse
from pathlib import Path
from typing import Sequence

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from grappleflow.config import configure_logging, load_settings  # noqa: E402
from grappleflow.models import TrainingSession  # noqa: E402
from grappleflow.server import build_state  # noqa: E402
from grappleflow.stats import (  # noqa: E402
    average_intensity,
    recent_activity,
    total_mat_minutes,
    type_distribution,
)
from grappleflow.utils.formatting import format_average, format_mat_time  # noqa: E402

COLORS = ["#6366f1", "#10b981", "#f59e0b", "#ec4899", "#8b5cf6"]


def plot_stats(sessions: Sequence[TrainingSession], output: Path) -> bool:
    """
    Draw the activity bar chart and type pie chart into one image.

    Args:
        sessions: Sessions to chart
        output: PNG file to write

    Returns:
        False if there was nothing to plot
    """
    if not sessions:
        return False

    activity = recent_activity(sessions)
    distribution = type_distribution(sessions)

    fig, (bar_ax, pie_ax) = plt.subplots(1, 2, figsize=(12, 5))

    labels = [label for label, _ in activity]
    counts = [count for _, count in activity]
    bar_ax.bar(labels, counts, color=COLORS[0])
    bar_ax.set_title("Recent Activity", fontsize=14, fontweight="bold")
    bar_ax.set_ylabel("Sessions", fontsize=12)
    bar_ax.grid(True, axis="y", alpha=0.3)

    pie_ax.pie(
        list(distribution.values()),
        labels=[t.value for t in distribution],
        colors=COLORS[: len(distribution)],
        autopct="%1.0f%%",
        wedgeprops={"width": 0.4},
    )
    pie_ax.set_title("Session Types", fontsize=14, fontweight="bold")

    fig.suptitle(
        f"Avg intensity {format_average(average_intensity(sessions))}  |  "
        f"Mat time {format_mat_time(total_mat_minutes(sessions))}",
        fontsize=12,
    )
    plt.tight_layout()
    plt.savefig(output, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return True


def main() -> int:
    parser = argparse.ArgumentParser(description="Save GrappleFlow training charts as a PNG")
    parser.add_argument(
        "-o",
        "--output",
        default="grappleflow_stats.png",
        help="Output PNG file path (default: grappleflow_stats.png)",
    )
    parser.add_argument("--env-file", help="Path to .env file with GrappleFlow settings")

    args = parser.parse_args()

    settings = load_settings(args.env_file)
    configure_logging(settings)
    state = build_state(settings)

    print(f"Loaded {len(state.sessions)} sessions")
    if not plot_stats(state.sessions, Path(args.output)):
        print("No sessions to plot. Log a session with grappleflow-log first.")
        return 1

    print(f"Saved plot: {args.output}")
    return 0


if __name__ == "__main__":
    exit(main())
