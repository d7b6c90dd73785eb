"""Coach G: AI advice built on the Gemini client.

Every public coroutine here returns a usable value. Transport, API and parse
failures are logged and replaced by a fixed fallback.
"""

import json
import logging
from typing import Optional, Sequence

from grappleflow.gemini_client import GeminiClient
from grappleflow.lab import sort_entries
from grappleflow.models import Challenge, LabEntry, TrainingSession
from grappleflow.stats import recent_sessions

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    'You are a world-class Brazilian Jiu-Jitsu coach and analyst named "Coach G".\n'
    "Your goal is to help students improve by analyzing their training logs, "
    "suggesting technical fixes, and providing strategic advice.\n"
    "You are encouraging but realistic. You use standard BJJ terminology (IBJJF standards).\n"
    "Keep responses concise and actionable."
)

GREETING = (
    "Oss! I'm Coach G. I can analyze your training logs or answer technical "
    "questions. How can I help today?"
)

MAX_ANALYZED_SESSIONS = 10

NO_DATA_MESSAGE = "No training data available yet. Log some sessions to get insights!"
ANALYSIS_EMPTY = "Could not generate analysis."
ANALYSIS_FALLBACK = "Error connecting to Coach G. Please try again later."
ADVICE_EMPTY = "I couldn't come up with an answer right now."
ADVICE_FALLBACK = "Network error. Coach G is offline."
INSIGHT_EMPTY = "Unable to generate insight."
INSIGHT_FALLBACK = "Coach G is currently analyzing other matches. Try again later."
DEFAULT_DRILLS = ["Shrimping", "Technical Standup", "Bridge and Roll"]

DRILLS_SCHEMA = {"type": "ARRAY", "items": {"type": "STRING"}}


def build_pattern_prompt(sessions: Sequence[TrainingSession]) -> str:
    """Prompt asking for one strength, one weakness and a drill for next week."""
    lines = []
    for s in recent_sessions(sessions, MAX_ANALYZED_SESSIONS):
        techniques = ", ".join(t.name for t in s.techniques)
        lines.append(
            f"Date: {s.date.isoformat()}, Type: {s.type.value}, Mood: {s.mood.value}, "
            f"Intensity: {s.intensity}/10, Notes: {s.notes}, Techniques: {techniques}"
        )
    summary = "\n".join(lines)
    return (
        "Analyze these recent BJJ training sessions. Identify 1 key strength and "
        "1 specific area for improvement.\n"
        "Suggest a drill or focus for the next week.\n\n"
        f"Sessions:\n{summary}"
    )


def build_advice_prompt(query: str, context: Optional[str] = None) -> str:
    if context:
        return f"Context from user's recent training: {context}\n\nUser Question: {query}"
    return query


def build_drills_prompt(position: str) -> str:
    return (
        f"Suggest 3 specific solo or partner drills to improve the '{position}' "
        "position in BJJ. Return JSON."
    )


def build_insight_prompt(challenge: Challenge, entries: Sequence[LabEntry]) -> str:
    """
    Prompt for the next step on a challenge, following the scientific method.

    The notebook history is listed oldest first so the model reads it as a
    story; the instructions branch on what the most recent entry was.

    Args:
        challenge: The challenge being worked on
        entries: Its notebook entries, in any order

    Returns:
        The prompt text
    """
    history_lines = []
    for e in sort_entries(entries):
        result = f" (Result: {e.result.value})" if e.result else ""
        history_lines.append(f"[{e.date.isoformat()}] {e.type.value.upper()}: {e.content}{result}")
    history = "\n".join(history_lines) if history_lines else "(empty)"

    return (
        "You are a scientific BJJ analyst. Help the student solve this specific "
        "challenge using the Scientific Method.\n\n"
        f"Challenge: {challenge.title}\n"
        f"Category: {challenge.category}\n\n"
        f"Lab Notebook History:\n{history}\n\n"
        "Based on the history:\n"
        "1. If the last entry was a FAILURE or OBSERVATION: Propose a new specific "
        "technical Hypothesis (solution) to test.\n"
        "2. If the last entry was a SUCCESS: Suggest how to refine or drill it to "
        "make it permanent.\n"
        "3. If the history is empty: Provide an initial Hypothesis based on standard "
        "high-percentage BJJ mechanics.\n\n"
        "Keep it concise. Focus on biomechanics and leverage."
    )


def parse_drills(text: str) -> Optional[list[str]]:
    """Parse a JSON array of strings. Returns None on any contract failure."""
    text = text.strip()
    if text.startswith("```"):
        text = "\n".join(line for line in text.split("\n") if not line.strip().startswith("```"))
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        logger.warning("Drill suggestions: JSON parse failed. Raw: %s", text[:200])
        return None
    if not isinstance(parsed, list) or not parsed:
        logger.warning("Drill suggestions: expected non-empty list, got %s", type(parsed).__name__)
        return None
    if not all(isinstance(item, str) for item in parsed):
        logger.warning("Drill suggestions: non-string item in %s", parsed)
        return None
    return parsed


class Coach:
    """Stateless request/response wrapper around the Gemini client."""

    def __init__(self, client: Optional[GeminiClient] = None):
        """
        Args:
            client: Gemini client; when None every request returns its fallback
        """
        self.client = client

    def _offline(self, request: str) -> bool:
        if self.client is None:
            logger.warning("%s skipped: GEMINI_API_KEY is not set", request)
            return True
        return False

    async def _generate(self, prompt: str, **kwargs) -> str:
        return await self.client.generate_content(
            prompt, system_instruction=SYSTEM_INSTRUCTION, **kwargs
        )

    async def analyze_training_patterns(self, sessions: Sequence[TrainingSession]) -> str:
        """Review up to the 10 most recent sessions."""
        if not sessions:
            return NO_DATA_MESSAGE
        if self._offline("Analysis"):
            return ANALYSIS_FALLBACK
        try:
            text = await self._generate(build_pattern_prompt(sessions))
        except Exception as e:
            logger.error("Analysis error: %s", e)
            return ANALYSIS_FALLBACK
        return text.strip() or ANALYSIS_EMPTY

    async def get_technical_advice(self, query: str, context: Optional[str] = None) -> str:
        """Answer a technical question, optionally with training notes as context."""
        if self._offline("Advice"):
            return ADVICE_FALLBACK
        try:
            text = await self._generate(build_advice_prompt(query, context))
        except Exception as e:
            logger.error("Advice error: %s", e)
            return ADVICE_FALLBACK
        return text.strip() or ADVICE_EMPTY

    async def suggest_drills(self, position: str) -> list[str]:
        """Three drills for a position, or the default drills on any failure."""
        if self._offline("Drill suggestion"):
            return list(DEFAULT_DRILLS)
        try:
            text = await self._generate(build_drills_prompt(position), response_schema=DRILLS_SCHEMA)
        except Exception as e:
            logger.error("Drill suggestion error: %s", e)
            return list(DEFAULT_DRILLS)
        drills = parse_drills(text)
        return drills if drills is not None else list(DEFAULT_DRILLS)

    async def generate_challenge_insight(
        self, challenge: Challenge, entries: Sequence[LabEntry]
    ) -> str:
        """Suggest the next step for a challenge from its notebook history."""
        if self._offline("Lab insight"):
            return INSIGHT_FALLBACK
        try:
            text = await self._generate(build_insight_prompt(challenge, entries))
        except Exception as e:
            logger.error("Lab insight error: %s", e)
            return INSIGHT_FALLBACK
        return text.strip() or INSIGHT_EMPTY

    async def close(self) -> None:
        if self.client is not None:
            await self.client.close()
