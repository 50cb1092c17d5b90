# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator, Iterator
from typing import Any

# Configure before the application modules read their settings.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("PASSWORD_OPSLIMIT", "1")
os.environ.setdefault("PASSWORD_MEMLIMIT", "8192")

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ourtalks.api.dependencies import get_notifier, get_session_factory
from ourtalks.core.security import hash_password
from ourtalks.db.session import Base
from ourtalks.db.session import get_db as app_get_session
from ourtalks.main import app as fastapi_app
from ourtalks.models import User
from ourtalks.repositories import Store

TEST_DB_URL = "sqlite://"


class RecordingNotifier:
    """Notifier that keeps every broadcast in memory."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    async def broadcast_all(self, event: str, payload: dict[str, Any]) -> None:
        self.events.append((event, payload))

    def named(self, event: str) -> list[dict[str, Any]]:
        return [payload for name, payload in self.events if name == event]


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Ensure each test sees a clean database even though the store commits.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture()
def store(db_session: Session) -> Store:
    return Store(db_session)


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    app.dependency_overrides[get_session_factory] = lambda: sessionmaker(
        bind=db_session.get_bind(), autocommit=False, autoflush=False
    )
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)
        app.dependency_overrides.pop(get_session_factory, None)


@pytest.fixture()
def recording_notifier(app: FastAPI, notifier: RecordingNotifier) -> Iterator[RecordingNotifier]:
    """Route service broadcasts to an in-memory recorder instead of live sockets."""
    app.dependency_overrides[get_notifier] = lambda: notifier
    try:
        yield notifier
    finally:
        app.dependency_overrides.pop(get_notifier, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


def create_user(store: Store, name: str, email: str, password: str = "secret1") -> User:
    """Persist a user directly through the store."""
    return store.create(User, name=name, email=email, password=hash_password(password))


@pytest.fixture()
def ann(store: Store) -> User:
    return create_user(store, "Ann", "ann@x.com")


@pytest.fixture()
def bob(store: Store) -> User:
    return create_user(store, "Bob", "bob@x.com")
