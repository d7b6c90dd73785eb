"""Storage modules for GrappleFlow."""

from grappleflow.storage.base import BaseStorage, CorruptDataError, get_data_dir
from grappleflow.storage.collections import (
    CHALLENGES_KEY,
    CHAT_KEY,
    LAB_ENTRIES_KEY,
    RECORD_TYPES,
    SESSIONS_KEY,
    CollectionStorage,
)

__all__ = [
    "BaseStorage",
    "CorruptDataError",
    "get_data_dir",
    "CollectionStorage",
    "SESSIONS_KEY",
    "CHALLENGES_KEY",
    "LAB_ENTRIES_KEY",
    "CHAT_KEY",
    "RECORD_TYPES",
]
