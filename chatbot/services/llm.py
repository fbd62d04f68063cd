from __future__ import annotations

import logging
from threading import Lock
from typing import Any, Iterable, List, Optional, Protocol, Sequence

from langchain_core.messages import (
    AIMessage,
    BaseMessage,
    HumanMessage,
    SystemMessage,
)
from langchain_google_genai import ChatGoogleGenerativeAI

from chatbot.config import Settings
from chatbot.errors import UpstreamError
from chatbot.schemas import Message

logger = logging.getLogger(__name__)


class ChatModel(Protocol):
    def invoke(self, input: List[BaseMessage]) -> Any: ...


class CompletionGateway:
    """Single-attempt bridge to the hosted Gemini chat model."""

    def __init__(self, settings: Settings, llm: Optional[ChatModel] = None) -> None:
        self._settings = settings
        self._llm = llm
        self._lock = Lock()

    @property
    def model(self) -> str:
        return self._settings.gemini_model

    def _get_llm(self, api_key: str) -> ChatModel:
        with self._lock:
            if self._llm is None:
                self._llm = ChatGoogleGenerativeAI(
                    model=self._settings.gemini_model,
                    google_api_key=api_key,
                    temperature=self._settings.llm_temperature,
                    max_output_tokens=self._settings.llm_max_output_tokens,
                    timeout=self._settings.llm_timeout_seconds,
                    max_retries=self._settings.llm_max_retries,
                )
            return self._llm

    @staticmethod
    def _map_messages(messages: Iterable[Message]) -> List[BaseMessage]:
        """Convert API message schema into LangChain message objects."""
        mapped: List[BaseMessage] = []
        for item in messages:
            if item.role == "system":
                mapped.append(SystemMessage(content=item.content))
            elif item.role == "user":
                mapped.append(HumanMessage(content=item.content))
            else:
                mapped.append(AIMessage(content=item.content))
        return mapped

    @staticmethod
    def _stringify_content(message: Any) -> str:
        """Extract textual content from Gemini responses."""
        content = getattr(message, "content", message)
        if isinstance(content, str):
            return content
        if isinstance(content, list):
            parts: List[str] = []
            for chunk in content:
                if isinstance(chunk, dict):
                    if chunk.get("type") == "text" and chunk.get("text"):
                        parts.append(chunk["text"])
                elif isinstance(chunk, str):
                    parts.append(chunk)
            return "\n".join(parts)
        return str(content)

    def complete(self, messages: Sequence[Message]) -> str:
        """Generate a reply for the assembled conversation.

        The credential is checked before anything is sent, so a missing key
        raises ConfigurationError without contacting the provider. The model
        is invoked exactly once; any failure is raised as UpstreamError.
        """
        api_key = self._settings.require_google_api_key()
        llm = self._get_llm(api_key)

        logger.info(
            "Invoking model=%s with %s message(s)", self.model, len(messages)
        )
        try:
            response = llm.invoke(self._map_messages(messages))
        except Exception as exc:
            raise UpstreamError(f"Gemini API call failed: {exc}") from exc

        reply_text = self._stringify_content(response)
        if not reply_text.strip():
            raise UpstreamError("Gemini returned an empty response.")
        return reply_text
