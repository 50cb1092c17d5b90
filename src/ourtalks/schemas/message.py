"""Message-related Pydantic schemas."""

from datetime import UTC, datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class SendMessageEvent(BaseModel):
    """Payload of an inbound ``sendMessage`` channel event."""

    sender: str | None = None
    receiver: str | None = None
    text: str | None = None


class MessageOut(BaseModel):
    """Persisted message as returned by the API and broadcast to listeners."""

    id: str = Field(..., validation_alias=AliasChoices("id", "_id"), serialization_alias="_id")
    sender: str
    receiver: str
    text: str
    timestamp: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("timestamp")
    @classmethod
    def ensure_utc(cls, value: datetime) -> datetime:
        """Attach UTC to naive timestamps read back from stores without tz support."""
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value
