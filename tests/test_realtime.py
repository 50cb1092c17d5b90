# tests/test_realtime.py
"""Unit tests for inbound event dispatch."""

import pytest

from ourtalks.api.endpoints.realtime import dispatch_event
from ourtalks.core.errors import ChatError, ValidationError


class StubMessaging:
    def __init__(self) -> None:
        self.calls = []

    async def send_message(self, sender, receiver, text):
        self.calls.append((sender, receiver, text))
        return {"sender": sender, "receiver": receiver, "text": text}


@pytest.mark.asyncio
async def test_dispatch_routes_send_message() -> None:
    messaging = StubMessaging()
    result = await dispatch_event(
        {"event": "sendMessage", "data": {"sender": "a", "receiver": "b", "text": "hi"}},
        messaging,
    )
    assert messaging.calls == [("a", "b", "hi")]
    assert result["text"] == "hi"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "frame",
    [None, ["sendMessage"], {"event": "sendMessage"}, {"event": "sendMessage", "data": "hi"}],
)
async def test_dispatch_rejects_malformed_frames(frame) -> None:
    with pytest.raises(ValidationError):
        await dispatch_event(frame, StubMessaging())


@pytest.mark.asyncio
async def test_dispatch_rejects_unknown_events() -> None:
    with pytest.raises(ChatError) as exc_info:
        await dispatch_event({"event": "typing", "data": {}}, StubMessaging())
    assert exc_info.value.code == "UNKNOWN_EVENT"


@pytest.mark.asyncio
async def test_dispatch_rejects_non_string_fields() -> None:
    messaging = StubMessaging()
    with pytest.raises(ValidationError):
        await dispatch_event(
            {"event": "sendMessage", "data": {"sender": "a", "receiver": "b", "text": ["x"]}},
            messaging,
        )
    assert messaging.calls == []
