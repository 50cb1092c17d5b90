"""SQLAlchemy model for registered chat users."""

from __future__ import annotations

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ourtalks.db.defaults import new_record_id
from ourtalks.db.session import Base


class User(Base):
    """Account identified by a unique email address."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_record_id)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    # The unique constraint, not the signup pre-check, guarantees one account per email.
    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    # argon2id hash string; plaintext is never stored.
    password: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, email={self.email!r})"
