"""Pydantic models for logged training sessions."""

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field


class SessionType(str, Enum):
    """Kinds of mat time that can be logged."""

    GI = "Gi"
    NOGI = "No-Gi"
    OPEN_MAT = "Open Mat"
    SEMINAR = "Seminar"
    COMPETITION = "Competition"


class Mood(str, Enum):
    """How the session felt."""

    GREAT = "Great"
    GOOD = "Good"
    NEUTRAL = "Neutral"
    HARD = "Hard"
    INJURED = "Injured"


class TechniqueCategory(str, Enum):
    """Categories for techniques drilled during a session."""

    GUARD = "Guard"
    PASS = "Pass"
    SUBMISSION = "Submission"
    ESCAPE = "Escape"
    TAKEDOWN = "Takedown"
    OTHER = "Other"


class Technique(BaseModel):
    """A technique worked on during a session."""

    id: str
    name: str = Field(min_length=1)
    category: TechniqueCategory = TechniqueCategory.OTHER
    notes: str = ""


class TrainingSession(BaseModel):
    """One logged training session."""

    id: str
    date: date
    duration_minutes: int = Field(gt=0)
    type: SessionType
    rounds: int = Field(ge=0)
    techniques: list[Technique] = Field(default_factory=list)
    notes: str = ""
    mood: Mood
    intensity: int = Field(ge=1, le=10)


# Values pre-filled in a new session form
DEFAULT_SESSION_TYPE = SessionType.GI
DEFAULT_MOOD = Mood.GOOD
DEFAULT_INTENSITY = 7
DEFAULT_DURATION_MINUTES = 90
DEFAULT_ROUNDS = 5
