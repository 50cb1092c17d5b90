"""Signup and login endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from ourtalks.api.dependencies import IdentityServiceDep
from ourtalks.schemas.user import LoginRequest, LoginResponse, SignupRequest, SignupResponse

router = APIRouter(tags=["authentication"])


@router.post("/signup", response_model=SignupResponse)
async def signup(payload: SignupRequest, identity: IdentityServiceDep) -> SignupResponse:
    """Create an account and broadcast it to connected clients."""
    user = await identity.signup(payload.name, payload.email, payload.password)
    return SignupResponse(user=user)


@router.post("/login", response_model=LoginResponse)
async def login(payload: LoginRequest, identity: IdentityServiceDep) -> LoginResponse:
    """Verify credentials. No token is issued; the client keeps the returned user."""
    user = await identity.login(payload.email, payload.password)
    return LoginResponse(user=user)
