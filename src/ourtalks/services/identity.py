"""Signup, login and user directory operations."""
from __future__ import annotations

import logging
from collections.abc import Callable

from fastapi.concurrency import run_in_threadpool

from ourtalks.core import security
from ourtalks.core.errors import (
    DuplicateKeyError,
    DuplicateUserError,
    InvalidCredentialsError,
    UserNotFoundError,
    ValidationError,
)
from ourtalks.models import User
from ourtalks.repositories import Store
from ourtalks.schemas.user import SafeUser
from ourtalks.services.notifier import NEW_USER_EVENT, Notifier

__all__ = ["IdentityService", "MISSING_FIELDS_MESSAGE"]

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "All fields are required"


def _require(*values: str | None) -> None:
    if any(value is None or not value.strip() for value in values):
        raise ValidationError(MISSING_FIELDS_MESSAGE)


def to_safe_user(user: User) -> SafeUser:
    """Project a User record onto its public fields."""
    return SafeUser.model_validate(user)


class IdentityService:
    """Account management on top of the store.

    Password hashing and verification are CPU-bound and run in the thread
    pool so other requests keep being served meanwhile.
    """

    def __init__(
        self,
        store: Store,
        notifier: Notifier,
        *,
        hasher: Callable[[str], str] = security.hash_password,
        verifier: Callable[[str, str], bool] = security.verify_password,
    ) -> None:
        self.store = store
        self.notifier = notifier
        self._hash = hasher
        self._verify = verifier

    async def signup(self, name: str | None, email: str | None, password: str | None) -> SafeUser:
        """Register a new user and announce it to live listeners.

        Raises:
            ValidationError: If any field is missing or blank.
            DuplicateUserError: If the email is already registered.
        """
        _require(name, email, password)

        if self.store.find_one(User, User.email == email) is not None:
            raise DuplicateUserError()

        hashed = await run_in_threadpool(self._hash, password)
        try:
            user = self.store.create(User, name=name, email=email, password=hashed)
        except DuplicateKeyError as exc:
            # A concurrent signup won the race between the pre-check and the insert.
            raise DuplicateUserError() from exc

        safe_user = to_safe_user(user)
        logger.info("User signed up", extra={"user_id": safe_user.id})
        await self.notifier.broadcast_all(NEW_USER_EVENT, safe_user.model_dump(mode="json", by_alias=True))
        return safe_user

    async def login(self, email: str | None, password: str | None) -> SafeUser:
        """Check credentials and return the matching user.

        No session or token is issued; clients keep the returned identity.

        Raises:
            ValidationError: If either field is missing or blank.
            UserNotFoundError: If no user has this email.
            InvalidCredentialsError: If the password does not match.
        """
        _require(email, password)

        user = self.store.find_one(User, User.email == email)
        if user is None:
            raise UserNotFoundError()

        if not await run_in_threadpool(self._verify, password, user.password):
            logger.info("Rejected login with invalid credentials", extra={"user_id": user.id})
            raise InvalidCredentialsError()

        logger.info("User logged in", extra={"user_id": user.id})
        return to_safe_user(user)

    def list_other_users(self, exclude_id: str) -> list[SafeUser]:
        """Return every user except ``exclude_id``, in store order."""
        users = self.store.find_many(User, User.id != exclude_id)
        return [to_safe_user(user) for user in users]
