# tests/services/test_notifier.py
"""Tests for the WebSocket connection manager."""

import pytest

from ourtalks.services.notifier import ConnectionManager


class FakeWebSocket:
    def __init__(self, fail: bool = False) -> None:
        self.accepted = False
        self.sent = []
        self.fail = fail

    async def accept(self) -> None:
        self.accepted = True

    async def send_json(self, data) -> None:
        if self.fail:
            raise RuntimeError("socket closed")
        self.sent.append(data)


@pytest.mark.asyncio
async def test_broadcast_reaches_every_connection() -> None:
    manager = ConnectionManager()
    sockets = [FakeWebSocket(), FakeWebSocket()]
    for ws in sockets:
        await manager.connect(ws)

    await manager.broadcast_all("newUser", {"_id": "1"})

    assert all(ws.accepted for ws in sockets)
    assert all(ws.sent == [{"event": "newUser", "data": {"_id": "1"}}] for ws in sockets)


@pytest.mark.asyncio
async def test_failed_listener_is_dropped_without_raising() -> None:
    manager = ConnectionManager()
    healthy, broken = FakeWebSocket(), FakeWebSocket(fail=True)
    healthy_id = await manager.connect(healthy)
    await manager.connect(broken)

    await manager.broadcast_all("receiveMessage", {"text": "hi"})

    assert manager.connection_ids == [healthy_id]
    assert healthy.sent == [{"event": "receiveMessage", "data": {"text": "hi"}}]


@pytest.mark.asyncio
async def test_late_listeners_get_no_replay() -> None:
    manager = ConnectionManager()
    await manager.broadcast_all("newUser", {"_id": "1"})

    late = FakeWebSocket()
    await manager.connect(late)
    assert late.sent == []


@pytest.mark.asyncio
async def test_send_targets_one_connection() -> None:
    manager = ConnectionManager()
    first, second = FakeWebSocket(), FakeWebSocket()
    first_id = await manager.connect(first)
    await manager.connect(second)

    await manager.send(first_id, "error", {"code": "X"})
    await manager.send("unknown", "error", {"code": "Y"})

    assert first.sent == [{"event": "error", "data": {"code": "X"}}]
    assert second.sent == []


@pytest.mark.asyncio
async def test_disconnect_forgets_connection() -> None:
    manager = ConnectionManager()
    ws = FakeWebSocket()
    connection_id = await manager.connect(ws)

    manager.disconnect(connection_id)
    manager.disconnect(connection_id)
    await manager.broadcast_all("newUser", {})

    assert manager.connection_ids == []
    assert ws.sent == []
