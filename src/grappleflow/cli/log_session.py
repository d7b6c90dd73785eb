#!/usr/bin/env python3
"""
Log a training session (or delete one) from the command line.
"""

import argparse

from pydantic import ValidationError

from grappleflow.config import configure_logging, load_settings
from grappleflow.models import Mood, SessionType
from grappleflow.models.training import (
    DEFAULT_DURATION_MINUTES,
    DEFAULT_INTENSITY,
    DEFAULT_MOOD,
    DEFAULT_ROUNDS,
    DEFAULT_SESSION_TYPE,
)
from grappleflow.server import build_state
from grappleflow.tools.sessions import parse_techniques
from grappleflow.utils.dates import parse_date


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Log a BJJ training session")
    parser.add_argument(
        "--type",
        dest="session_type",
        choices=[t.value for t in SessionType],
        default=DEFAULT_SESSION_TYPE.value,
        help=f"Session type (default: {DEFAULT_SESSION_TYPE.value})",
    )
    parser.add_argument(
        "--duration",
        type=int,
        default=DEFAULT_DURATION_MINUTES,
        help=f"Duration in minutes (default: {DEFAULT_DURATION_MINUTES})",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=DEFAULT_ROUNDS,
        help=f"Sparring rounds (default: {DEFAULT_ROUNDS})",
    )
    parser.add_argument(
        "--intensity",
        type=int,
        default=DEFAULT_INTENSITY,
        help=f"Intensity 1-10 (default: {DEFAULT_INTENSITY})",
    )
    parser.add_argument(
        "--mood",
        choices=[m.value for m in Mood],
        default=DEFAULT_MOOD.value,
        help=f"How it felt (default: {DEFAULT_MOOD.value})",
    )
    parser.add_argument("--notes", default="", help="Free-form notes")
    parser.add_argument("--techniques", default="", help="Comma-separated technique names")
    parser.add_argument("--date", help="Session date YYYY-MM-DD (default: today)")
    parser.add_argument("--delete", metavar="SESSION_ID", help="Delete a session instead")
    parser.add_argument("--env-file", help="Path to .env file with GrappleFlow settings")
    return parser


def main() -> int:
    """Save the session described by the arguments."""
    args = build_parser().parse_args()

    settings = load_settings(args.env_file)
    configure_logging(settings)
    state = build_state(settings)

    if args.delete:
        if not state.delete_session(args.delete):
            print(f"Error: Session not found: {args.delete}")
            return 1
        print(f"Deleted session {args.delete}")
        return 0

    try:
        session = state.add_session(
            duration_minutes=args.duration,
            type=SessionType(args.session_type),
            rounds=args.rounds,
            notes=args.notes,
            mood=Mood(args.mood),
            intensity=args.intensity,
            date=parse_date(args.date) if args.date else None,
            techniques=parse_techniques(args.techniques),
        )
    except (ValidationError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    print(
        f"Saved session {session.id}: {session.date.isoformat()} {session.type.value}, "
        f"{session.duration_minutes} min, intensity {session.intensity}/10"
    )
    print(f"Storage location: {state.storage.data_dir.absolute()}")
    return 0


if __name__ == "__main__":
    exit(main())
