"""Models describing chat messages between users."""

from datetime import datetime

from sqlalchemy import DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ourtalks.db.defaults import new_record_id, utcnow
from ourtalks.db.session import Base


class Message(Base):
    """Plain-text message sent from one user to another.

    Sender and receiver are stored as bare identifiers; they are not foreign
    keys because callers are trusted to supply existing user ids.
    """

    __tablename__ = "messages"
    __table_args__ = (Index("ix_messages_sender_receiver", "sender", "receiver"),)

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_record_id)
    sender: Mapped[str] = mapped_column(Text, nullable=False)
    receiver: Mapped[str] = mapped_column(Text, nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, index=True
    )
