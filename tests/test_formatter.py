import re
from datetime import datetime, timedelta, timezone

import pytest

from chatbot.errors import ConfigurationError, InvalidMessageError, UpstreamError
from chatbot.services.formatter import current_timestamp, format_error, format_reply

FIXED = datetime(2024, 5, 1, 12, 30, 15, 123456, tzinfo=timezone.utc)


def fixed_clock():
    return FIXED


def test_timestamp_format():
    assert current_timestamp(fixed_clock) == "2024-05-01T12:30:15.123Z"


def test_timestamp_converts_to_utc():
    local = datetime(2024, 5, 1, 14, 30, tzinfo=timezone(timedelta(hours=2)))
    assert current_timestamp(lambda: local) == "2024-05-01T12:30:00.000Z"


def test_default_clock_is_iso_utc():
    assert re.fullmatch(
        r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", current_timestamp()
    )


@pytest.mark.parametrize("conversation_id", ["abc", "", None, "  spaced id  "])
def test_reply_echoes_conversation_id(conversation_id):
    response = format_reply("hi", conversation_id, fixed_clock)

    assert response.reply == "hi"
    assert response.conversation_id == conversation_id
    assert response.timestamp == "2024-05-01T12:30:15.123Z"


def test_reply_serializes_with_camel_case_id():
    dumped = format_reply("hi", "abc", fixed_clock).model_dump(by_alias=True)
    assert dumped == {
        "reply": "hi",
        "conversationId": "abc",
        "timestamp": "2024-05-01T12:30:15.123Z",
    }


@pytest.mark.parametrize(
    "error_cls, kind",
    [
        (ConfigurationError, "configuration_error"),
        (UpstreamError, "upstream_error"),
        (InvalidMessageError, "validation_error"),
    ],
)
def test_error_payload(error_cls, kind):
    error = error_cls("internal detail")

    payload = format_error(error, "abc", fixed_clock)

    assert payload.reply == error_cls.user_message
    assert payload.error == kind
    assert payload.detail == "internal detail"
    assert payload.conversation_id == "abc"
    assert payload.timestamp == "2024-05-01T12:30:15.123Z"
