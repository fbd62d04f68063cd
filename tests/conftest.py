import pytest
from langchain_core.messages import AIMessage

from chatbot.config import Settings


class FakeChatModel:
    """Records every invoke call and replies with a canned answer."""

    def __init__(self, reply="I assist visitors.", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def invoke(self, messages):
        self.calls.append(list(messages))
        if self.error is not None:
            raise self.error
        return AIMessage(content=self.reply)


@pytest.fixture
def fake_llm():
    return FakeChatModel()


@pytest.fixture
def settings_with_key(monkeypatch):
    monkeypatch.setenv("GOOGLE_API_KEY", "test-key")
    return Settings()


@pytest.fixture
def settings_without_key(monkeypatch):
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    return Settings()
