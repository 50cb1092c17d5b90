# src/ourtalks/db/defaults.py
"""Column default factories for database models."""

from uuid import uuid4
from datetime import UTC, datetime


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(UTC)


def new_record_id() -> str:
    """Return a fresh opaque record identifier (32 hex characters)."""
    return uuid4().hex
