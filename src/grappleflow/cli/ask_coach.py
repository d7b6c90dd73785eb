#!/usr/bin/env python3
"""
Talk to Coach G from the command line.

Ask a technical question, request a review of your training ("analyze my
training"), or get drills for a position with --drills.
"""

import argparse
import asyncio

from grappleflow.config import configure_logging, load_settings
from grappleflow.server import build_state
from grappleflow.state import AppState
from grappleflow.views import View, render_view


async def _ask(state: AppState, message: str) -> str:
    try:
        reply = await state.send_coach_message(message)
    finally:
        await state.coach.close()
    return reply.text


async def _drills(state: AppState, position: str) -> list[str]:
    try:
        return await state.coach.suggest_drills(position)
    finally:
        await state.coach.close()


def main() -> int:
    parser = argparse.ArgumentParser(description="Ask Coach G a question")
    parser.add_argument("message", nargs="?", help="Question or request for Coach G")
    parser.add_argument("--drills", metavar="POSITION", help="Suggest drills for a position")
    parser.add_argument("--history", action="store_true", help="Print the conversation so far")
    parser.add_argument("--env-file", help="Path to .env file with GrappleFlow settings")

    args = parser.parse_args()
    if not (args.message or args.drills or args.history):
        parser.error("give a message, --drills POSITION or --history")

    settings = load_settings(args.env_file)
    configure_logging(settings)
    state = build_state(settings)

    if args.history:
        print(render_view(View.COACH, state))
        return 0

    if args.drills:
        drills = asyncio.run(_drills(state, args.drills))
        print(f"Drills for {args.drills}:")
        for i, drill in enumerate(drills, 1):
            print(f"  {i}. {drill}")
        return 0

    if not args.message.strip():
        print("Error: message must not be empty")
        return 1

    print(f"Coach G: {asyncio.run(_ask(state, args.message))}")
    return 0


if __name__ == "__main__":
    exit(main())
