"""Error hierarchy for the chat backend.

Every failure a caller can observe is a ``ChatError`` carrying a stable
``code`` and the HTTP status it maps to. Business-rule failures are 400s with
a short user-facing message; store failures are 500s whose detail stays in
the logs.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "ChatError",
    "ValidationError",
    "DuplicateUserError",
    "UserNotFoundError",
    "InvalidCredentialsError",
    "StoreError",
    "DuplicateKeyError",
    "GENERIC_SERVER_MESSAGE",
]

GENERIC_SERVER_MESSAGE = "Server error"


class ChatError(Exception):
    """Base exception for all domain and store errors."""

    code = "CHAT_ERROR"
    http_status = 400

    def __init__(self, message: str, *, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    @property
    def public_message(self) -> str:
        """Message safe to hand back to clients."""
        return self.message

    def to_response(self) -> dict[str, Any]:
        """Convert to the JSON error envelope used by HTTP and WebSocket replies."""
        return {"success": False, "error": self.public_message, "code": self.code}


class ValidationError(ChatError):
    """A required field is missing or empty."""

    code = "VALIDATION_ERROR"


class DuplicateUserError(ChatError):
    """Signup attempted with an email that is already registered."""

    code = "USER_EXISTS"

    def __init__(self, message: str = "User already exists") -> None:
        super().__init__(message)


class UserNotFoundError(ChatError):
    """Login attempted with an unknown email."""

    code = "USER_NOT_FOUND"

    def __init__(self, message: str = "User not found") -> None:
        super().__init__(message)


class InvalidCredentialsError(ChatError):
    """Password did not match the stored hash."""

    code = "INVALID_CREDENTIALS"

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)


class StoreError(ChatError):
    """Underlying persistence failure, including connectivity loss."""

    code = "STORE_ERROR"
    http_status = 500

    @property
    def public_message(self) -> str:
        return GENERIC_SERVER_MESSAGE


class DuplicateKeyError(StoreError):
    """Insert rejected by a unique constraint."""

    code = "DUPLICATE_KEY"
