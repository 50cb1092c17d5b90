# src/ourtalks/models/__init__.py
"""SQLAlchemy models for the chat application."""

from .message import Message
from .user import User

__all__ = ["Message", "User"]
