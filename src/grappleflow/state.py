"""Application state: owns every collection and persists each change."""

import logging
import uuid
from datetime import date, datetime, timedelta
from typing import Callable, Optional

from grappleflow.coach import GREETING, Coach
from grappleflow.errors import ChallengeNotFoundError
from grappleflow.lab import entries_for, sort_challenges
from grappleflow.models import (
    Challenge,
    ChallengeStatus,
    ChatMessage,
    ChatRole,
    ExperimentResult,
    LabEntry,
    LabEntryType,
    Mood,
    SessionType,
    Technique,
    TrainingSession,
)
from grappleflow.models.training import (
    DEFAULT_DURATION_MINUTES,
    DEFAULT_INTENSITY,
    DEFAULT_MOOD,
    DEFAULT_ROUNDS,
    DEFAULT_SESSION_TYPE,
)
from grappleflow.stats import recent_sessions
from grappleflow.storage import (
    CHALLENGES_KEY,
    CHAT_KEY,
    LAB_ENTRIES_KEY,
    SESSIONS_KEY,
    CollectionStorage,
)

logger = logging.getLogger(__name__)

# Chat messages containing any of these are answered with a training review
ANALYSIS_TRIGGERS = ("analyze", "my training", "progress")
ADVICE_CONTEXT_SESSIONS = 3
CHAT_ERROR_MESSAGE = "I'm having trouble connecting to the mats right now. Try again later."
TICK = timedelta(microseconds=1)


def _generate_id() -> str:
    return str(uuid.uuid4())[:8]


class AppState:
    """
    Holds sessions, challenges, lab entries and the coach chat in memory.

    Collections are read once from storage when the state is loaded. Every
    mutation updates memory first and then rewrites the affected collections.
    """

    def __init__(
        self,
        storage: CollectionStorage,
        coach: Optional[Coach] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.storage = storage
        self.coach = coach if coach is not None else Coach()
        self._clock = clock
        self.sessions: list[TrainingSession] = []
        self.challenges: list[Challenge] = []
        self.lab_entries: list[LabEntry] = []
        self.chat: list[ChatMessage] = []
        self._pending_insights: set[str] = set()

    @classmethod
    def load(
        cls,
        storage: CollectionStorage,
        coach: Optional[Coach] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> "AppState":
        """Create the state from whatever is currently stored."""
        state = cls(storage, coach=coach, clock=clock)
        state.sessions = storage.load(SESSIONS_KEY)
        state.challenges = storage.load(CHALLENGES_KEY)
        state.lab_entries = storage.load(LAB_ENTRIES_KEY)
        state.chat = storage.load(CHAT_KEY)
        if not state.chat:
            state.chat = [
                ChatMessage(id="greeting", role=ChatRole.MODEL, text=GREETING, timestamp=clock())
            ]
        return state

    def now(self) -> datetime:
        return self._clock()

    # ---- training log ----

    def add_session(
        self,
        duration_minutes: int = DEFAULT_DURATION_MINUTES,
        type: SessionType = DEFAULT_SESSION_TYPE,
        rounds: int = DEFAULT_ROUNDS,
        notes: str = "",
        mood: Mood = DEFAULT_MOOD,
        intensity: int = DEFAULT_INTENSITY,
        date: Optional[date] = None,
        techniques: Optional[list[Technique]] = None,
    ) -> TrainingSession:
        """Log a new session, dated today unless a date is given."""
        session = TrainingSession(
            id=_generate_id(),
            date=date or self.now().date(),
            duration_minutes=duration_minutes,
            type=type,
            rounds=rounds,
            techniques=techniques or [],
            notes=notes,
            mood=mood,
            intensity=intensity,
        )
        self.sessions.insert(0, session)
        self.storage.save(SESSIONS_KEY, self.sessions)
        return session

    def delete_session(self, session_id: str) -> bool:
        """Delete a session. Returns True if it existed."""
        remaining = [s for s in self.sessions if s.id != session_id]
        if len(remaining) == len(self.sessions):
            return False
        self.sessions = remaining
        self.storage.save(SESSIONS_KEY, self.sessions)
        return True

    # ---- lab notebook ----

    def get_challenge(self, challenge_id: str) -> Optional[Challenge]:
        return next((c for c in self.challenges if c.id == challenge_id), None)

    def require_challenge(self, challenge_id: str) -> Challenge:
        challenge = self.get_challenge(challenge_id)
        if challenge is None:
            raise ChallengeNotFoundError(challenge_id)
        return challenge

    def list_challenges(self) -> list[Challenge]:
        return sort_challenges(self.challenges)

    def entries_for(self, challenge_id: str) -> list[LabEntry]:
        return entries_for(self.lab_entries, challenge_id)

    def create_challenge(self, title: str, category: str = "Guard") -> Challenge:
        """Open a new, empty challenge with status Active."""
        now = self.now()
        challenge = Challenge(
            id=_generate_id(),
            title=title.strip(),
            category=category.strip(),
            status=ChallengeStatus.ACTIVE,
            created_at=now,
            last_updated=now,
        )
        self.challenges.insert(0, challenge)
        self.storage.save(CHALLENGES_KEY, self.challenges)
        return challenge

    def add_entry(
        self,
        challenge_id: str,
        type: LabEntryType,
        content: str,
        result: Optional[ExperimentResult] = None,
    ) -> LabEntry:
        """
        Append a notebook entry and bump the challenge's last_updated.

        Experiments without an explicit result are recorded as Inconclusive.
        Analysis entries are only written by Coach G.

        Raises:
            ChallengeNotFoundError: If the challenge does not exist
            ValueError: If the entry type is Analysis
        """
        if type == LabEntryType.ANALYSIS:
            raise ValueError("Analysis entries are written by Coach G")
        if type == LabEntryType.EXPERIMENT and result is None:
            result = ExperimentResult.INCONCLUSIVE
        return self._append_entry(challenge_id, type, content, result)

    def _append_entry(
        self,
        challenge_id: str,
        type: LabEntryType,
        content: str,
        result: Optional[ExperimentResult] = None,
    ) -> LabEntry:
        challenge = self.require_challenge(challenge_id)
        # Each append lands strictly after the previous one, even if the clock
        # stalls or steps back
        now = self.now()
        stamp = now if now > challenge.last_updated else challenge.last_updated + TICK
        entry = LabEntry(
            id=_generate_id(),
            challenge_id=challenge_id,
            date=stamp,
            type=type,
            content=content.strip(),
            result=result,
        )
        self.lab_entries.append(entry)
        self._replace_challenge(challenge.model_copy(update={"last_updated": stamp}))

        self.storage.save(LAB_ENTRIES_KEY, self.lab_entries)
        self.storage.save(CHALLENGES_KEY, self.challenges)
        return entry

    def set_challenge_status(self, challenge_id: str, status: ChallengeStatus) -> Challenge:
        """Mark a challenge Active, Solved or Shelved."""
        challenge = self.require_challenge(challenge_id)
        updated = challenge.model_copy(update={"status": status})
        self._replace_challenge(updated)
        self.storage.save(CHALLENGES_KEY, self.challenges)
        return updated

    def delete_challenge(self, challenge_id: str) -> bool:
        """Delete a challenge together with all of its entries."""
        if self.get_challenge(challenge_id) is None:
            return False
        self.lab_entries = [e for e in self.lab_entries if e.challenge_id != challenge_id]
        self.challenges = [c for c in self.challenges if c.id != challenge_id]
        self.storage.save(LAB_ENTRIES_KEY, self.lab_entries)
        self.storage.save(CHALLENGES_KEY, self.challenges)
        return True

    def _replace_challenge(self, updated: Challenge) -> None:
        self.challenges = [updated if c.id == updated.id else c for c in self.challenges]

    def is_insight_pending(self, challenge_id: str) -> bool:
        return challenge_id in self._pending_insights

    async def request_insight(self, challenge_id: str) -> Optional[LabEntry]:
        """
        Ask Coach G for the next step and file the reply as an Analysis entry.

        Only one request per challenge may be in flight. If the challenge is
        deleted while waiting, the reply is dropped.

        Args:
            challenge_id: Challenge to analyze

        Returns:
            The new Analysis entry, or None if the request was refused or dropped

        Raises:
            ChallengeNotFoundError: If the challenge does not exist
        """
        challenge = self.require_challenge(challenge_id)
        if challenge_id in self._pending_insights:
            logger.info("Insight already pending for challenge %s", challenge_id)
            return None

        self._pending_insights.add(challenge_id)
        try:
            insight = await self.coach.generate_challenge_insight(
                challenge, self.entries_for(challenge_id)
            )
        finally:
            self._pending_insights.discard(challenge_id)

        if self.get_challenge(challenge_id) is None:
            logger.info("Challenge %s deleted before insight arrived; dropping it", challenge_id)
            return None
        return self._append_entry(challenge_id, LabEntryType.ANALYSIS, insight)

    # ---- coach chat ----

    async def send_coach_message(self, text: str) -> ChatMessage:
        """
        Post a message to Coach G and record the reply.

        Messages asking to analyze training or progress get a review of recent
        sessions; anything else is answered as a technical question with the
        latest session notes as context.

        Returns:
            The model's reply message
        """
        text = text.strip()
        if not text:
            raise ValueError("Message must not be empty")

        self._append_chat(ChatRole.USER, text)

        lowered = text.lower()
        try:
            if any(trigger in lowered for trigger in ANALYSIS_TRIGGERS):
                reply = await self.coach.analyze_training_patterns(self.sessions)
            else:
                notes = [s.notes for s in recent_sessions(self.sessions, ADVICE_CONTEXT_SESSIONS)]
                context = "; ".join(n for n in notes if n) or None
                reply = await self.coach.get_technical_advice(text, context)
        except Exception:
            logger.exception("Coach chat failed")
            reply = CHAT_ERROR_MESSAGE

        return self._append_chat(ChatRole.MODEL, reply)

    def _append_chat(self, role: ChatRole, text: str) -> ChatMessage:
        message = ChatMessage(id=_generate_id(), role=role, text=text, timestamp=self.now())
        self.chat.append(message)
        self.storage.save(CHAT_KEY, self.chat)
        return message
