"""Settings loaded from the environment and an optional .env file."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from grappleflow.gemini_client import DEFAULT_MODEL, GeminiClient
from grappleflow.storage.base import get_data_dir


class Settings(BaseModel):
    """Runtime configuration."""

    data_dir: Path
    gemini_api_key: Optional[str] = None
    gemini_model: str = DEFAULT_MODEL
    log_level: str = "WARNING"


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Read settings from environment variables.

    Args:
        env_file: Path to a .env file; if omitted, the nearest .env is loaded

    Returns:
        The resolved settings
    """
    if env_file:
        load_dotenv(dotenv_path=env_file, override=True)
    else:
        load_dotenv()

    return Settings(
        data_dir=get_data_dir(),
        gemini_api_key=os.environ.get("GEMINI_API_KEY") or None,
        gemini_model=os.environ.get("GRAPPLEFLOW_MODEL") or DEFAULT_MODEL,
        log_level=(os.environ.get("GRAPPLEFLOW_LOG_LEVEL") or "WARNING").upper(),
    )


def configure_logging(settings: Settings) -> None:
    """Send log records to stderr at the configured level."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_gemini_client(settings: Settings) -> Optional[GeminiClient]:
    """Build a Gemini client, or None when no API key is configured."""
    if not settings.gemini_api_key:
        logging.getLogger(__name__).warning(
            "GEMINI_API_KEY is not set. AI features will not work."
        )
        return None
    return GeminiClient(settings.gemini_api_key, model=settings.gemini_model)
