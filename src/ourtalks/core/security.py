"""Password hashing built on libsodium's argon2id primitives."""
from __future__ import annotations

from nacl.exceptions import InvalidkeyError
from nacl.pwhash import argon2id

from ourtalks.core.settings import settings


def hash_password(password: str) -> str:
    """Return an argon2id hash string for ``password``.

    The work factor comes from ``PASSWORD_OPSLIMIT`` / ``PASSWORD_MEMLIMIT`` and
    is encoded in the returned string, so verification needs no extra state.
    """
    hashed = argon2id.str(
        password.encode("utf-8"),
        opslimit=settings.password_opslimit,
        memlimit=settings.password_memlimit,
    )
    return hashed.decode("ascii")


def verify_password(password: str, password_hash: str) -> bool:
    """Check ``password`` against a stored argon2id hash.

    Returns:
        True if the password matches; False otherwise.
    """
    try:
        return argon2id.verify(password_hash.encode("ascii"), password.encode("utf-8"))
    except (InvalidkeyError, UnicodeEncodeError):
        return False
