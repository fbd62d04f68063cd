from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from chatbot.config import get_settings
from chatbot.schemas import ChatRequest, ChatResponse
from chatbot.services.context import DEFAULT_WINDOW_SIZE, build_context_window
from chatbot.services.formatter import Clock, format_reply
from chatbot.services.llm import CompletionGateway
from chatbot.services.prompt import SYSTEM_PROMPT, assemble_messages

logger = logging.getLogger(__name__)


class ChatService:
    """Stateless chat turn: window the history, ask the model, stamp the reply."""

    def __init__(
        self,
        gateway: CompletionGateway,
        system_prompt: str = SYSTEM_PROMPT,
        window_size: int = DEFAULT_WINDOW_SIZE,
        clock: Optional[Clock] = None,
    ) -> None:
        self._gateway = gateway
        self._system_prompt = system_prompt
        self._window_size = window_size
        self._clock = clock

    def handle(self, request: ChatRequest) -> ChatResponse:
        context = build_context_window(request.history, self._window_size)
        messages = assemble_messages(self._system_prompt, context, request.message)
        reply = self._gateway.complete(messages)
        logger.info(
            "Reply generated: conversation_id=%s chars=%s",
            request.conversation_id,
            len(reply),
        )
        return format_reply(reply, request.conversation_id, self._clock)


@lru_cache
def get_chat_service() -> ChatService:
    """Return a singleton ChatService instance."""
    settings = get_settings()
    return ChatService(
        CompletionGateway(settings),
        window_size=settings.history_window,
    )
