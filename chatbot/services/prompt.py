from __future__ import annotations

from typing import Iterable, List, Optional

from chatbot.errors import InvalidMessageError
from chatbot.schemas import Message

SYSTEM_PROMPT = (
    "You are the website assistant for this portfolio site. "
    "Help visitors learn about the site owner's background, skills, projects, "
    "and how to get in touch. Answer using only what you know about the site "
    "and the current conversation; if you are unsure, say so and suggest the "
    "contact page instead of guessing. Politely decline requests unrelated to "
    "the site. Keep replies short, friendly, and professional, and respond in "
    "the same language the visitor uses."
)


def assemble_messages(
    system_prompt: str,
    context: Iterable[Message],
    user_message: Optional[str],
) -> List[Message]:
    """Build the ordered message list sent to the model.

    The system instruction comes first, followed by the windowed context and
    finally the new user message. Raises InvalidMessageError when the user
    message is missing or only whitespace.
    """
    if user_message is None or not user_message.strip():
        raise InvalidMessageError("Field 'message' must be a non-empty string.")

    messages: List[Message] = []
    if system_prompt:
        messages.append(Message(role="system", content=system_prompt))
    messages.extend(context)
    messages.append(Message(role="user", content=user_message))
    return messages
