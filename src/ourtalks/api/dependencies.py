"""Shared API dependencies wiring the store and notifier into services."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session, sessionmaker

from ourtalks.db.session import SessionLocal, get_db
from ourtalks.repositories import Store
from ourtalks.services import IdentityService, MessagingService
from ourtalks.services.notifier import ConnectionManager, Notifier, get_connection_manager

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_notifier() -> Notifier:
    """Return the notifier services broadcast through."""
    return get_connection_manager()


def get_connections() -> ConnectionManager:
    """Return the connection registry used by the WebSocket endpoint."""
    return get_connection_manager()


NotifierDep = Annotated[Notifier, Depends(get_notifier)]
ConnectionsDep = Annotated[ConnectionManager, Depends(get_connections)]


def get_store(db: SessionDep) -> Store:
    return Store(db)


StoreDep = Annotated[Store, Depends(get_store)]


def get_identity_service(store: StoreDep, notifier: NotifierDep) -> IdentityService:
    return IdentityService(store, notifier)


def get_messaging_service(store: StoreDep, notifier: NotifierDep) -> MessagingService:
    return MessagingService(store, notifier)


IdentityServiceDep = Annotated[IdentityService, Depends(get_identity_service)]
MessagingServiceDep = Annotated[MessagingService, Depends(get_messaging_service)]


def get_session_factory() -> sessionmaker[Session]:
    """Return the factory long-lived connections use to open a session per unit of work."""
    return SessionLocal


SessionFactoryDep = Annotated[sessionmaker[Session], Depends(get_session_factory)]
