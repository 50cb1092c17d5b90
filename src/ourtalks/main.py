# src/ourtalks/main.py
"""Main entry point for the OurTalks application."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ourtalks.api import (
    auth_router,
    chat_router,
    realtime_router,
    system_router,
    users_router,
)
from ourtalks.api.error_handlers import register_error_handlers
from ourtalks.core.observability import setup_logging
from ourtalks.core.settings import settings
from ourtalks.db.session import check_connection, create_tables

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and the database before serving; unreachable storage aborts startup."""
    setup_logging(settings.log_level, settings.log_format)
    check_connection()
    create_tables()
    logger.info(f"{settings.app_name} started")
    yield
    logger.info(f"{settings.app_name} shutting down")


# Initialize FastAPI app
app = FastAPI(
    title=f"{settings.app_name} API",
    description="Real-time chat backend",
    version=settings.app_version,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Include API routers
app.include_router(system_router)
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(chat_router)
app.include_router(realtime_router)


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""
    import uvicorn

    uvicorn.run("ourtalks.main:app", host=settings.host, port=settings.port, reload=settings.debug)


if __name__ == "__main__":
    run()
