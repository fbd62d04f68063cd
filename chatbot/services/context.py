from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, List, Optional

from chatbot.schemas import HistoryEntry, Message, Origin

DEFAULT_WINDOW_SIZE = 5


def to_message(entry: HistoryEntry) -> Message:
    """Translate a caller history entry into a role-tagged message."""
    return Message(role=Origin.parse(entry.origin).value, content=entry.text)


def build_context_window(
    history: Optional[Iterable[HistoryEntry]],
    window_size: int = DEFAULT_WINDOW_SIZE,
) -> List[Message]:
    """Keep the most recent ``window_size`` history entries, oldest first."""
    if window_size < 0:
        raise ValueError("window_size must not be negative.")
    if not history or window_size == 0:
        return []

    limited: Deque[HistoryEntry] = deque(maxlen=window_size)
    for entry in history:
        limited.append(entry)
    return [to_message(entry) for entry in limited]
