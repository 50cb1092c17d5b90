# src/ourtalks/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .message import MessageOut, SendMessageEvent
from .user import LoginRequest, LoginResponse, SafeUser, SignupRequest, SignupResponse

__all__ = [
    "MessageOut", "SendMessageEvent",
    "LoginRequest", "LoginResponse",
    "SafeUser",
    "SignupRequest", "SignupResponse",
]
