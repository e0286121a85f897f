"""
Domain errors and their HTTP translation.

Services raise the exceptions defined here instead of returning
sentinel values.  ``register_exception_handlers`` installs FastAPI
handlers that turn them, together with request validation errors,
unknown routes and unexpected failures, into the JSON envelopes
clients of this API expect.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base class for errors raised by the service layer."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(ServiceError):
    """A required field is missing or empty."""

    status_code = status.HTTP_400_BAD_REQUEST


class InvalidReference(ServiceError):
    """A foreign key does not resolve to an existing record."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(ServiceError):
    """A lookup by id found nothing."""

    status_code = status.HTTP_404_NOT_FOUND


def utc_timestamp() -> str:
    """Return the current UTC time as ISO-8601 with milliseconds and ``Z``."""
    now = datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def failure(message: str, **extra: Any) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": False, "message": message}
    body.update(extra)
    return body


def register_exception_handlers(app: FastAPI, *, development: bool) -> None:
    """Install the application's exception handlers on ``app``.

    Parameters
    ----------
    app : FastAPI
        Application to configure.
    development : bool
        When true, 500 responses include the exception text.
    """

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
        logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
        return JSONResponse(status_code=exc.status_code, content=failure(exc.message))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("%s %s -> 400: invalid request body", request.method, request.url.path)
        errors = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=jsonable_encoder(failure("Invalid request body", errors=errors)),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Unknown paths and unsupported methods both read as missing routes.
        if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
            path = request.url.path
            if request.url.query:
                path = f"{path}?{request.url.query}"
            return JSONResponse(
                status_code=status.HTTP_404_NOT_FOUND,
                content={"error": "Route not found", "path": path, "timestamp": utc_timestamp()},
            )
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail, "timestamp": utc_timestamp()},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Error: %s", exc, exc_info=exc)
        message = str(exc) if development else "Something went wrong"
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "message": message, "timestamp": utc_timestamp()},
        )
