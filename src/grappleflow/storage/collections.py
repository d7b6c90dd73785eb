"""Whole-collection storage for sessions, challenges, lab entries and chat."""

import logging
from pathlib import Path
from typing import Any, Sequence

from pydantic import BaseModel, TypeAdapter, ValidationError

from grappleflow.models import ChatMessage, Challenge, LabEntry, TrainingSession
from grappleflow.storage.base import BaseStorage, CorruptDataError

logger = logging.getLogger(__name__)

SESSIONS_KEY = "grappleflow_sessions"
CHALLENGES_KEY = "grappleflow_challenges"
LAB_ENTRIES_KEY = "grappleflow_lab_entries"
CHAT_KEY = "grappleflow_chat"

# Record type stored under each key
RECORD_TYPES: dict[str, type[BaseModel]] = {
    SESSIONS_KEY: TrainingSession,
    CHALLENGES_KEY: Challenge,
    LAB_ENTRIES_KEY: LabEntry,
    CHAT_KEY: ChatMessage,
}


class CollectionStorage(BaseStorage):
    """
    Stores each collection as one JSON list under a fixed key.

    Every save rewrites the whole list. Loads validate every record and fall
    back to an empty collection when anything is malformed.
    """

    def _path_for(self, key: str) -> Path:
        if key not in RECORD_TYPES:
            raise KeyError(f"Unknown collection key: {key}")
        return self.data_dir / f"{key}.json"

    def load(self, key: str) -> list[Any]:
        """
        Load a collection.

        Args:
            key: One of the fixed collection keys

        Returns:
            The validated records, or an empty list if the file is missing
            or malformed
        """
        file_path = self._path_for(key)
        try:
            raw = self._load_json(file_path)
        except (CorruptDataError, OSError, UnicodeDecodeError) as e:
            self._discard(file_path, f"unreadable: {e}")
            return []

        if raw is None:
            return []
        if not isinstance(raw, list):
            self._discard(file_path, f"expected a list, got {type(raw).__name__}")
            return []

        adapter = TypeAdapter(list[RECORD_TYPES[key]])  # type: ignore[valid-type]
        try:
            return adapter.validate_python(raw)
        except ValidationError as e:
            self._discard(file_path, f"{e.error_count()} invalid field(s)")
            return []

    def save(self, key: str, records: Sequence[BaseModel]) -> None:
        """
        Overwrite a collection with the given records.

        Args:
            key: One of the fixed collection keys
            records: The full collection to store
        """
        file_path = self._path_for(key)
        self._save_json(file_path, [record.model_dump(mode="json") for record in records])

    def _discard(self, file_path: Path, reason: str) -> None:
        backup = self._backup_corrupt(file_path)
        logger.warning(
            "Discarding stored data in %s (%s); starting empty. Backup: %s",
            file_path.name,
            reason,
            backup.name if backup else "none",
        )
