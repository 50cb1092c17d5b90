# src/ourtalks/api/__init__.py
"""HTTP and WebSocket API surface."""

from .endpoints import (
    auth_router,
    chat_router,
    realtime_router,
    system_router,
    users_router,
)

__all__ = [
    "auth_router",
    "chat_router",
    "realtime_router",
    "system_router",
    "users_router",
]
