"""WebSocket event channel.

Clients exchange JSON frames shaped ``{"event": <name>, "data": {...}}``.
Inbound handlers either return a result or raise a ``ChatError``; the
connection loop logs every failure the same way and reports it to the
originating connection only, leaving the socket open.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import pydantic
from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from ourtalks.api.dependencies import ConnectionsDep, NotifierDep, SessionFactoryDep
from ourtalks.core.errors import GENERIC_SERVER_MESSAGE, ChatError, StoreError, ValidationError
from ourtalks.repositories import Store
from ourtalks.schemas.message import SendMessageEvent
from ourtalks.services import MessagingService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["realtime"])

SEND_MESSAGE_EVENT = "sendMessage"
ERROR_EVENT = "error"

EventHandler = Callable[[dict[str, Any], MessagingService], Awaitable[Any]]


async def handle_send_message(data: dict[str, Any], messaging: MessagingService) -> Any:
    """Persist an inbound message; the service broadcasts ``receiveMessage``."""
    try:
        event = SendMessageEvent.model_validate(data)
    except pydantic.ValidationError as exc:
        raise ValidationError("Invalid sendMessage payload") from exc
    return await messaging.send_message(event.sender, event.receiver, event.text)


EVENT_HANDLERS: dict[str, EventHandler] = {
    SEND_MESSAGE_EVENT: handle_send_message,
}


async def dispatch_event(frame: Any, messaging: MessagingService) -> Any:
    """Route one decoded frame to its handler and return the handler's result.

    Raises:
        ValidationError: If the frame or its data is not a JSON object.
        ChatError: With code ``UNKNOWN_EVENT`` for unregistered event names.
    """
    if not isinstance(frame, dict):
        raise ValidationError("Event frame must be a JSON object")
    name = frame.get("event")
    handler = EVENT_HANDLERS.get(name) if isinstance(name, str) else None
    if handler is None:
        raise ChatError(f"Unknown event: {name}", code="UNKNOWN_EVENT")
    data = frame.get("data")
    if not isinstance(data, dict):
        raise ValidationError("Event data must be a JSON object")
    return await handler(data, messaging)


async def receive_frame(websocket: WebSocket) -> Any:
    """Read one frame and decode it as JSON.

    Text and binary frames are both accepted; anything that does not decode
    comes back as None so dispatch rejects it with ``VALIDATION_ERROR``.

    Raises:
        WebSocketDisconnect: When the client goes away.
    """
    message = await websocket.receive()
    if message["type"] == "websocket.disconnect":
        raise WebSocketDisconnect(message.get("code", 1000), message.get("reason"))
    raw = message.get("text")
    if raw is None:
        raw = message.get("bytes")
    try:
        return json.loads(raw)
    except (TypeError, ValueError):
        return None


@router.websocket("/ws")
async def event_channel(
    websocket: WebSocket,
    session_factory: SessionFactoryDep,
    notifier: NotifierDep,
    connections: ConnectionsDep,
) -> None:
    """Register the listener and serve its inbound events until it disconnects.

    Each frame gets its own short-lived session so an idle listener holds no
    database connection.
    """
    connection_id = await connections.connect(websocket)
    try:
        while True:
            frame = await receive_frame(websocket)
            try:
                with session_factory() as db:
                    await dispatch_event(frame, MessagingService(Store(db), notifier))
            except ChatError as exc:
                log = logger.error if isinstance(exc, StoreError) else logger.warning
                log(
                    f"Event failed: {exc.message}",
                    extra={"connection_id": connection_id, "error_code": exc.code},
                )
                await connections.send(connection_id, ERROR_EVENT, exc.to_response())
            except Exception:
                logger.exception(
                    "Unhandled error while processing event",
                    extra={"connection_id": connection_id},
                )
                await connections.send(
                    connection_id,
                    ERROR_EVENT,
                    {"success": False, "error": GENERIC_SERVER_MESSAGE, "code": "INTERNAL_ERROR"},
                )
    except WebSocketDisconnect:
        pass
    finally:
        connections.disconnect(connection_id)
