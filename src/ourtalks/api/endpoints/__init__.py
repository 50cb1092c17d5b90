# src/ourtalks/api/endpoints/__init__.py
"""API endpoint modules."""

from .auth import router as auth_router
from .chat import router as chat_router
from .realtime import router as realtime_router
from .system import router as system_router
from .users import router as users_router

__all__ = [
    "auth_router",
    "chat_router",
    "realtime_router",
    "system_router",
    "users_router",
]
