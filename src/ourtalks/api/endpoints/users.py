"""User directory endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from ourtalks.api.dependencies import IdentityServiceDep
from ourtalks.schemas.user import SafeUser

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/{user_id}", response_model=list[SafeUser])
async def list_other_users(user_id: str, identity: IdentityServiceDep) -> list[SafeUser]:
    """List every registered user except the caller."""
    return identity.list_other_users(user_id)
