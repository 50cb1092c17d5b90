# src/ourtalks/services/__init__.py
"""Business logic services for the chat application."""

from .identity import IdentityService
from .messaging import MessagingService
from .notifier import ConnectionManager, Notifier, get_connection_manager

__all__ = [
    "IdentityService",
    "MessagingService",
    "ConnectionManager",
    "Notifier",
    "get_connection_manager",
]
