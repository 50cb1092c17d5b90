"""Global exception handlers mapping errors to the JSON error envelope.

Domain errors keep their own status and message; store errors and anything
unexpected become a generic 500 so internal detail stays in the logs.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ourtalks.core.errors import GENERIC_SERVER_MESSAGE, ChatError, StoreError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_chat_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_chat_error_handler(app: FastAPI) -> None:

    @app.exception_handler(ChatError)
    async def chat_error_handler(request: Request, exc: ChatError):
        """Handle domain and store errors raised by services."""
        log = logger.error if isinstance(exc, StoreError) else logger.info
        log(
            f"{type(exc).__name__}: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        """Handle malformed request bodies."""
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "success": False,
                "error": "Invalid request data",
                "code": "VALIDATION_ERROR",
            },
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all; never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "success": False,
                "error": GENERIC_SERVER_MESSAGE,
                "code": "INTERNAL_ERROR",
            },
        )
