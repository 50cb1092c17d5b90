"""Uniform data access for the chat entities."""
from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, TypeVar

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ourtalks.core.errors import DuplicateKeyError, StoreError
from ourtalks.db.session import Base

__all__ = ["Store"]

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=Base)


class Store:
    """Thin create/find wrapper around a SQLAlchemy session.

    Each call touches a single entity type and commits on its own; there are
    no multi-statement transactions. SQLAlchemy failures are rolled back and
    re-raised as ``StoreError`` (``DuplicateKeyError`` for unique violations).
    """

    def __init__(self, session: Session) -> None:
        """Initialize the store with a SQLAlchemy session."""
        self.session = session

    def create(self, entity: type[EntityT], **fields: Any) -> EntityT:
        """Insert a new record and return the persisted ORM instance.

        Args:
            entity: Model class to instantiate.
            **fields: Column values; omitted columns fall back to model defaults.

        Raises:
            DuplicateKeyError: If a unique constraint rejects the insert.
            StoreError: On any other persistence failure.
        """
        record = entity(**fields)
        self.session.add(record)
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            logger.warning(f"Unique constraint rejected {entity.__name__} insert")
            raise DuplicateKeyError(f"Duplicate {entity.__name__}") from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error(f"Failed to insert {entity.__name__}: {exc}")
            raise StoreError(f"Failed to insert {entity.__name__}") from exc
        self.session.refresh(record)
        return record

    def find_one(self, entity: type[EntityT], *criteria: ColumnElement[bool]) -> EntityT | None:
        """Return the first record matching all criteria, or None."""
        stmt = select(entity).where(*criteria).limit(1)
        return self._run(entity, lambda: self.session.scalars(stmt).first())

    def find_many(
        self,
        entity: type[EntityT],
        *criteria: ColumnElement[bool],
        order_by: Iterable[Any] = (),
    ) -> list[EntityT]:
        """Return every record matching all criteria, optionally sorted."""
        stmt = select(entity).where(*criteria).order_by(*order_by)
        return self._run(entity, lambda: list(self.session.scalars(stmt)))

    def count(self, entity: type[EntityT], *criteria: ColumnElement[bool]) -> int:
        """Return the number of records matching all criteria."""
        stmt = select(func.count()).select_from(entity).where(*criteria)
        return self._run(entity, lambda: int(self.session.scalar(stmt) or 0))

    def _run(self, entity: type[Base], query: Any) -> Any:
        try:
            return query()
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error(f"Failed to query {entity.__name__}: {exc}")
            raise StoreError(f"Failed to query {entity.__name__}") from exc
