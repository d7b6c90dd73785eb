"""Pydantic models for GrappleFlow."""

from grappleflow.models.training import (
    Mood,
    SessionType,
    Technique,
    TechniqueCategory,
    TrainingSession,
)
from grappleflow.models.lab import (
    DEFAULT_CATEGORIES,
    Challenge,
    ChallengeStatus,
    ExperimentResult,
    LabEntry,
    LabEntryType,
)
from grappleflow.models.coaching import ChatMessage, ChatRole

__all__ = [
    # Training log models
    "SessionType",
    "Mood",
    "TechniqueCategory",
    "Technique",
    "TrainingSession",
    # Lab notebook models
    "DEFAULT_CATEGORIES",
    "ChallengeStatus",
    "LabEntryType",
    "ExperimentResult",
    "Challenge",
    "LabEntry",
    # Coaching models
    "ChatRole",
    "ChatMessage",
]
