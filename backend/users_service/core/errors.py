# users_service/core/errors.py
"""
FastAPI exception handlers.
Translate the service's typed failures into HTTP responses with safe messages.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from users_service import messages
from users_service.core.exceptions import StorageError, UnauthorizedError, UsersServiceError

logger = logging.getLogger("uvicorn.error")


async def service_error_handler(request: Request, exc: UsersServiceError) -> JSONResponse:
    """
    Handle client-side failures (400/401/403/404).
    Their messages are fixed, non-sensitive strings and are echoed verbatim.
    """
    logger.info("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.message)
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedError) else None
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message}, headers=headers)


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    """Handle persistence failures. Driver details stay in the server log."""
    logger.error(
        "Storage error on %s %s: %r",
        request.method,
        request.url.path,
        exc.__cause__ or exc,
        exc_info=exc,
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.default_message})


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle anything else as 500 without leaking internals."""
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": messages.Unexpected})


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app."""
    app.add_exception_handler(StorageError, storage_error_handler)
    app.add_exception_handler(UsersServiceError, service_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
