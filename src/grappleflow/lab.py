"""Lab Notebook rules derived from a challenge's entries."""

from typing import Any, Iterable, Sequence

from grappleflow.models import Challenge, LabEntry, LabEntryType


def entries_for(entries: Iterable[LabEntry], challenge_id: str) -> list[LabEntry]:
    """Entries filed under one challenge, oldest first by date."""
    return sort_entries(e for e in entries if e.challenge_id == challenge_id)


def sort_entries(entries: Iterable[LabEntry]) -> list[LabEntry]:
    # Ordered by entry date, not insertion order
    return sorted(entries, key=lambda e: e.date)


def has_untested_idea(entries: Iterable[LabEntry]) -> bool:
    """
    True if some hypothesis has not been followed by an experiment.

    An experiment only counts as a test of a hypothesis when its date is
    strictly later than the hypothesis date.

    Args:
        entries: Entries of a single challenge

    Returns:
        Whether an untested hypothesis exists
    """
    entries = list(entries)
    experiment_dates = [e.date for e in entries if e.type == LabEntryType.EXPERIMENT]
    latest_experiment = max(experiment_dates, default=None)
    for entry in entries:
        if entry.type != LabEntryType.HYPOTHESIS:
            continue
        if latest_experiment is None or not latest_experiment > entry.date:
            return True
    return False


def experiment_count(entries: Iterable[LabEntry]) -> int:
    return sum(1 for e in entries if e.type == LabEntryType.EXPERIMENT)


def sort_challenges(challenges: Iterable[Challenge]) -> list[Challenge]:
    """Challenges with the most recently updated first."""
    return sorted(challenges, key=lambda c: c.last_updated, reverse=True)


def summarize_challenge(challenge: Challenge, entries: Sequence[LabEntry]) -> dict[str, Any]:
    """Summary row for a challenge list."""
    own = [e for e in entries if e.challenge_id == challenge.id]
    return {
        "id": challenge.id,
        "title": challenge.title,
        "category": challenge.category,
        "status": challenge.status.value,
        "last_updated": challenge.last_updated.isoformat(),
        "notes": len(own),
        "tests": experiment_count(own),
        "untested_idea": has_untested_idea(own),
    }
