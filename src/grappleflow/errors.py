"""Exceptions raised by GrappleFlow."""


class GrappleFlowError(Exception):
    """Base class for application errors."""


class ChallengeNotFoundError(GrappleFlowError):
    """Raised when an operation names a challenge that does not exist."""

    def __init__(self, challenge_id: str):
        super().__init__(f"Challenge not found: {challenge_id}")
        self.challenge_id = challenge_id
