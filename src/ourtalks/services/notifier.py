"""Live fan-out of chat events to connected WebSocket listeners."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Protocol
from uuid import uuid4

from fastapi import WebSocket

logger = logging.getLogger(__name__)

__all__ = [
    "Notifier",
    "ConnectionManager",
    "get_connection_manager",
    "NEW_USER_EVENT",
    "RECEIVE_MESSAGE_EVENT",
]

NEW_USER_EVENT = "newUser"
RECEIVE_MESSAGE_EVENT = "receiveMessage"


class Notifier(Protocol):
    """Capability to push an event to every connected listener."""

    async def broadcast_all(self, event: str, payload: dict[str, Any]) -> None: ...


class ConnectionManager:
    """Registry of live WebSocket connections keyed by a generated id.

    Broadcasts reach only the connections registered when the call starts;
    nothing is buffered for listeners that connect later.
    """

    def __init__(self) -> None:
        self._connections: dict[str, WebSocket] = {}

    @property
    def connection_ids(self) -> list[str]:
        return list(self._connections)

    async def connect(self, websocket: WebSocket) -> str:
        """Accept the socket and register it; return its connection id."""
        await websocket.accept()
        connection_id = uuid4().hex
        self._connections[connection_id] = websocket
        logger.info("Listener connected", extra={"connection_id": connection_id})
        return connection_id

    def disconnect(self, connection_id: str) -> None:
        """Forget a connection. Unknown ids are ignored."""
        if self._connections.pop(connection_id, None) is not None:
            logger.info("Listener disconnected", extra={"connection_id": connection_id})

    async def send(self, connection_id: str, event: str, payload: dict[str, Any]) -> None:
        """Deliver one event frame to a single connection."""
        websocket = self._connections.get(connection_id)
        if websocket is None:
            return
        await websocket.send_json({"event": event, "data": payload})

    async def broadcast_all(self, event: str, payload: dict[str, Any]) -> None:
        """Send ``{"event", "data"}`` to every connected listener.

        A listener that fails to receive is dropped; the failure never reaches
        the caller.
        """
        frame = {"event": event, "data": payload}
        for connection_id, websocket in list(self._connections.items()):
            try:
                await websocket.send_json(frame)
            except Exception as exc:
                logger.warning(
                    f"Dropping listener after failed delivery: {exc}",
                    extra={"connection_id": connection_id, "event": event},
                )
                self._connections.pop(connection_id, None)


@lru_cache
def get_connection_manager() -> ConnectionManager:
    """Return the process-wide connection manager."""
    return ConnectionManager()
