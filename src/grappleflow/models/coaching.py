"""Pydantic models for the coach conversation."""

from enum import Enum

from pydantic import BaseModel, NaiveDatetime


class ChatRole(str, Enum):
    """Author of a chat message."""

    USER = "user"
    MODEL = "model"


class ChatMessage(BaseModel):
    """A single message in the conversation with Coach G."""

    id: str
    role: ChatRole
    text: str
    timestamp: NaiveDatetime
