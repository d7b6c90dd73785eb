#!/usr/bin/env python3
"""
MCP server for GrappleFlow.
This server exposes the training log, stats, Lab Notebook and Coach G as tools.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from mcp.server.fastmcp import FastMCP

from grappleflow.coach import Coach
from grappleflow.config import Settings, configure_logging, create_gemini_client, load_settings
from grappleflow.state import AppState
from grappleflow.storage import CollectionStorage
from grappleflow.tools import register_all_tools

logger = logging.getLogger(__name__)


def build_state(settings: Settings) -> AppState:
    """Load the application state for the configured data directory."""
    storage = CollectionStorage(settings.data_dir)
    coach = Coach(create_gemini_client(settings))
    return AppState.load(storage, coach=coach)


def create_server(state: AppState, name: str = "grappleflow") -> FastMCP:
    @asynccontextmanager
    async def lifespan(server: FastMCP) -> AsyncIterator[None]:
        try:
            yield
        finally:
            await state.coach.close()

    mcp = FastMCP(name, lifespan=lifespan)
    register_all_tools(mcp, state)
    return mcp


def main(env_file: Optional[str] = None) -> None:
    """Run the MCP server over stdio."""
    settings = load_settings(env_file)
    configure_logging(settings)

    state = build_state(settings)
    logger.info("Data directory: %s", settings.data_dir)

    mcp = create_server(state)
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
