"""Conversation history endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from ourtalks.api.dependencies import MessagingServiceDep
from ourtalks.schemas.message import MessageOut

router = APIRouter(prefix="/chat", tags=["messages"])


@router.get("/{user_id}/{other_id}", response_model=list[MessageOut])
async def fetch_chat(user_id: str, other_id: str, messaging: MessagingServiceDep) -> list[MessageOut]:
    """Return all messages exchanged between two users, oldest first."""
    return messaging.fetch_chat(user_id, other_id)
