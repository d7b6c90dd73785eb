"""Base storage class with data directory configuration."""

import json
import logging
import os
import time
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class CorruptDataError(Exception):
    """Raised when a stored JSON file cannot be parsed."""


def get_data_dir() -> Path:
    """
    Get the data directory for storing local files.

    Uses GRAPPLEFLOW_DATA_DIR environment variable if set, otherwise defaults
    to ~/.config/grappleflow.

    Returns:
        Path to the data directory
    """
    env_dir = os.environ.get("GRAPPLEFLOW_DATA_DIR")
    if env_dir:
        return Path(env_dir).expanduser()
    return Path.home() / ".config" / "grappleflow"


class BaseStorage:
    """Base class for storage implementations."""

    def __init__(self, data_dir: Path | None = None):
        """
        Initialize storage rooted at a data directory.

        Args:
            data_dir: Directory holding the JSON files (default: get_data_dir())
        """
        self.data_dir = Path(data_dir) if data_dir is not None else get_data_dir()
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def _load_json(self, file_path: Path) -> dict[str, Any] | list[Any] | None:
        """
        Load JSON from a file, returning None if it doesn't exist or is empty.

        Raises:
            CorruptDataError: If the file exists but is not valid JSON
        """
        if not file_path.exists():
            return None
        text = file_path.read_text(encoding="utf-8")
        if not text.strip():
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise CorruptDataError(f"{file_path.name}: {e}") from e

    def _save_json(self, file_path: Path, data: dict[str, Any] | list[Any]) -> None:
        """Save data as JSON, replacing the file in one step."""
        tmp_path = file_path.with_name(file_path.name + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, default=str, ensure_ascii=False)
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, file_path)

    def _backup_corrupt(self, file_path: Path) -> Path | None:
        """Copy an unreadable file aside so the next save does not destroy it."""
        if not file_path.exists():
            return None
        backup = file_path.with_name(f"{file_path.stem}.corrupt-{int(time.time())}.json")
        try:
            backup.write_bytes(file_path.read_bytes())
        except OSError as e:
            logger.warning("Could not back up %s: %s", file_path, e)
            return None
        return backup
