import logging
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class Origin(str, Enum):
    """Who produced a history entry, as seen by the caller."""

    USER = "user"
    ASSISTANT = "assistant"

    @classmethod
    def parse(cls, value: str | None) -> "Origin":
        """Map a raw origin string to an Origin.

        Only the exact value ``"user"`` is a user turn. Everything else,
        including unknown or malformed values, is treated as an assistant turn.
        """
        if value == cls.USER.value:
            return cls.USER
        if value != cls.ASSISTANT.value:
            logger.debug("Unknown history origin %r treated as assistant", value)
        return cls.ASSISTANT


class Message(BaseModel):
    """Represents a single turn in the chat history."""

    model_config = ConfigDict(frozen=True)

    role: Literal["system", "user", "assistant"] = Field(
        ..., description="Role of the speaker for this message."
    )
    content: str = Field(..., description="Message text.")


class HistoryEntry(BaseModel):
    """A prior conversation turn supplied by the caller."""

    origin: str | None = Field(
        default=None,
        description="'user' for visitor turns; anything else is the assistant.",
    )
    text: str = Field(..., description="Message text.")


class ChatRequest(BaseModel):
    """Incoming request payload for a chat turn."""

    model_config = ConfigDict(populate_by_name=True)

    message: str | None = Field(
        default="", description="New user input that needs a reply."
    )
    history: list[HistoryEntry] | None = Field(
        default_factory=list,
        description="Prior conversation, oldest first. Only the latest turns are used.",
    )
    conversation_id: str | None = Field(
        default=None,
        alias="conversationId",
        description="Opaque caller identifier echoed back unchanged.",
    )


class ChatResponse(BaseModel):
    """Response payload corresponding to the chatbot reply."""

    model_config = ConfigDict(populate_by_name=True)

    reply: str = Field(..., description="Assistant response.")
    conversation_id: str | None = Field(
        default=None,
        alias="conversationId",
        description="Conversation identifier echoed from the request.",
    )
    timestamp: str = Field(..., description="ISO-8601 UTC time of the response.")


class ErrorResponse(ChatResponse):
    """Reply-shaped payload returned when a chat turn fails."""

    error: str = Field(..., description="Machine-readable failure kind.")
    detail: str = Field(..., description="Diagnostic detail, not for end users.")
