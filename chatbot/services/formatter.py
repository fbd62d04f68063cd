from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional

from chatbot.errors import ChatError
from chatbot.schemas import ChatResponse, ErrorResponse

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def current_timestamp(clock: Optional[Clock] = None) -> str:
    """Return the current UTC instant as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    now = (clock or _utcnow)().astimezone(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_reply(
    reply: str,
    conversation_id: Optional[str],
    clock: Optional[Clock] = None,
) -> ChatResponse:
    return ChatResponse(
        reply=reply,
        conversation_id=conversation_id,
        timestamp=current_timestamp(clock),
    )


def format_error(
    error: ChatError,
    conversation_id: Optional[str],
    clock: Optional[Clock] = None,
) -> ErrorResponse:
    """Wrap a failed turn in a reply-shaped payload with a safe fallback text."""
    return ErrorResponse(
        reply=error.user_message,
        conversation_id=conversation_id,
        timestamp=current_timestamp(clock),
        error=error.kind,
        detail=error.detail,
    )
