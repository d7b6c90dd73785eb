#!/usr/bin/env python3
"""
Work with the Lab Notebook: challenges and their entries.

Subcommands:
  list                         list challenges
  create TITLE [--category]    start a challenge
  entry ID TYPE CONTENT        add an Observation, Hypothesis or Experiment
  show ID                      print a challenge's notebook
  status ID STATUS             mark Active, Solved or Shelved
  delete ID                    delete a challenge and its entries
  insight ID                   ask Coach G for the next step
"""

import argparse
import asyncio

from pydantic import ValidationError

from grappleflow.config import configure_logging, load_settings
from grappleflow.errors import GrappleFlowError
from grappleflow.models import DEFAULT_CATEGORIES, ChallengeStatus, ExperimentResult, LabEntryType
from grappleflow.server import build_state
from grappleflow.state import AppState
from grappleflow.views import View, render_challenge, render_view

USER_ENTRY_TYPES = [LabEntryType.OBSERVATION, LabEntryType.HYPOTHESIS, LabEntryType.EXPERIMENT]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="GrappleFlow Lab Notebook")
    parser.add_argument("--env-file", help="Path to .env file with GrappleFlow settings")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List challenges")

    create = sub.add_parser("create", help="Start a new challenge")
    create.add_argument("title")
    create.add_argument(
        "--category",
        default=DEFAULT_CATEGORIES[0],
        help=f"One of {', '.join(DEFAULT_CATEGORIES)} or your own (default: {DEFAULT_CATEGORIES[0]})",
    )

    entry = sub.add_parser("entry", help="Add a notebook entry")
    entry.add_argument("challenge_id")
    entry.add_argument("entry_type", choices=[t.value for t in USER_ENTRY_TYPES])
    entry.add_argument("content")
    entry.add_argument(
        "--result",
        choices=[r.value for r in ExperimentResult],
        help="Experiment result (default: Inconclusive)",
    )

    show = sub.add_parser("show", help="Print a challenge's notebook")
    show.add_argument("challenge_id")

    status = sub.add_parser("status", help="Set a challenge's status")
    status.add_argument("challenge_id")
    status.add_argument("status", choices=[s.value for s in ChallengeStatus])

    delete = sub.add_parser("delete", help="Delete a challenge and its entries")
    delete.add_argument("challenge_id")

    insight = sub.add_parser("insight", help="Ask Coach G for the next step")
    insight.add_argument("challenge_id")

    return parser


async def _request_insight(state: AppState, challenge_id: str) -> None:
    try:
        entry = await state.request_insight(challenge_id)
    finally:
        await state.coach.close()
    if entry is not None:
        print(entry.content)


def run_command(state: AppState, args: argparse.Namespace) -> int:
    """Execute a parsed subcommand against the state."""
    if args.command == "list":
        print(render_view(View.LAB, state))
    elif args.command == "create":
        challenge = state.create_challenge(args.title, args.category)
        print(f"Created challenge {challenge.id}: {challenge.title}")
    elif args.command == "entry":
        if args.result and args.entry_type != LabEntryType.EXPERIMENT.value:
            print("Error: --result only applies to Experiment entries")
            return 1
        entry = state.add_entry(
            args.challenge_id,
            LabEntryType(args.entry_type),
            args.content,
            ExperimentResult(args.result) if args.result else None,
        )
        print(f"Saved {entry.type.value} {entry.id}")
    elif args.command == "show":
        print(render_challenge(state, args.challenge_id))
    elif args.command == "status":
        challenge = state.set_challenge_status(args.challenge_id, ChallengeStatus(args.status))
        print(f"{challenge.title}: {challenge.status.value}")
    elif args.command == "delete":
        if not state.delete_challenge(args.challenge_id):
            print(f"Error: Challenge not found: {args.challenge_id}")
            return 1
        print(f"Deleted challenge {args.challenge_id}")
    elif args.command == "insight":
        print("Coach G is thinking...")
        asyncio.run(_request_insight(state, args.challenge_id))
    return 0


def main() -> int:
    args = build_parser().parse_args()

    settings = load_settings(args.env_file)
    configure_logging(settings)
    state = build_state(settings)

    try:
        return run_command(state, args)
    except (GrappleFlowError, ValidationError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    exit(main())
