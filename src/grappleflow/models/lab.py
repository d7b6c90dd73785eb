"""Pydantic models for the Lab Notebook: challenges and their entries."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, NaiveDatetime, model_validator


class ChallengeStatus(str, Enum):
    """Operator-set status of a challenge."""

    ACTIVE = "Active"
    SOLVED = "Solved"
    SHELVED = "Shelved"


class LabEntryType(str, Enum):
    """Kinds of notebook entries."""

    OBSERVATION = "Observation"
    HYPOTHESIS = "Hypothesis"
    EXPERIMENT = "Experiment"
    ANALYSIS = "Analysis"


class ExperimentResult(str, Enum):
    """Outcome of an experiment entry."""

    SUCCESS = "Success"
    FAILURE = "Failure"
    INCONCLUSIVE = "Inconclusive"


# Suggested categories; any non-empty category is accepted
DEFAULT_CATEGORIES = ("Guard", "Passing", "Takedown", "Escape", "Submission", "Pinning")


class Challenge(BaseModel):
    """A technical problem being worked on, e.g. "Can't pass closed guard"."""

    id: str
    title: str = Field(min_length=1)
    category: str = Field(default="Guard", min_length=1)
    status: ChallengeStatus = ChallengeStatus.ACTIVE
    created_at: NaiveDatetime
    last_updated: NaiveDatetime


class LabEntry(BaseModel):
    """A timestamped note filed under a challenge."""

    id: str
    challenge_id: str
    date: NaiveDatetime
    type: LabEntryType
    content: str = Field(min_length=1)
    result: Optional[ExperimentResult] = None

    @model_validator(mode="after")
    def _result_only_for_experiments(self) -> "LabEntry":
        if self.result is not None and self.type != LabEntryType.EXPERIMENT:
            raise ValueError(f"result is only allowed on Experiment entries, not {self.type.value}")
        return self
