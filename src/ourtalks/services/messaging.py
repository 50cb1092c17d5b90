"""Service-level helpers for sending and reading chat messages."""
from __future__ import annotations

import logging

from sqlalchemy import and_, or_

from ourtalks.core.errors import ValidationError
from ourtalks.models import Message
from ourtalks.repositories import Store
from ourtalks.schemas.message import MessageOut
from ourtalks.services.notifier import RECEIVE_MESSAGE_EVENT, Notifier

__all__ = ["MessagingService"]

logger = logging.getLogger(__name__)


class MessagingService:
    """Persist messages and fan them out to every live listener."""

    def __init__(self, store: Store, notifier: Notifier) -> None:
        self.store = store
        self.notifier = notifier

    async def send_message(
        self,
        sender: str | None,
        receiver: str | None,
        text: str | None,
    ) -> MessageOut:
        """Store a message and broadcast it.

        Sender and receiver are taken as given; they are not looked up in the
        user table.

        Raises:
            ValidationError: If sender, receiver or text is missing or blank.
        """
        if not sender or not receiver:
            raise ValidationError("Sender and receiver are required")
        if text is None or not text.strip():
            raise ValidationError("Message text is required")

        message = self.store.create(Message, sender=sender, receiver=receiver, text=text)
        out = MessageOut.model_validate(message)
        logger.info("Message stored", extra={"user_id": sender})
        await self.notifier.broadcast_all(RECEIVE_MESSAGE_EVENT, out.model_dump(mode="json", by_alias=True))
        return out

    def fetch_chat(self, user_id: str, other_id: str) -> list[MessageOut]:
        """Return the conversation between two users, oldest first."""
        messages = self.store.find_many(
            Message,
            or_(
                and_(Message.sender == user_id, Message.receiver == other_id),
                and_(Message.sender == other_id, Message.receiver == user_id),
            ),
            order_by=(Message.timestamp.asc(), Message.id.asc()),
        )
        return [MessageOut.model_validate(message) for message in messages]
