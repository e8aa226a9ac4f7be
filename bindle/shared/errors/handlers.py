"""
Centralized error handlers for FastAPI.

Maps storage errors to TOML replies through into_reply.
Request validation and routing errors get the same TOML error body.
No stack traces or internal details are exposed to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException
from starlette.responses import Response

from bindle.domain.storage.errors import StorageError
from bindle.shared.errors.mapping import (
    HTTP_400,
    HTTP_500,
    describe_validation_errors,
    into_reply,
    reply_from_error,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(StorageError)
    async def handle_storage_error(_request: Request, exc: StorageError) -> Response:
        """Render a storage failure with its classified status."""
        logger.warning("Storage error (%s): %s", exc.kind.value, exc.message)
        return into_reply(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> Response:
        """Render invalid path or query parameters as a 400."""
        detail = describe_validation_errors(exc.errors())
        logger.warning("Invalid request: %s", detail)
        return reply_from_error(f"invalid request: {detail}", HTTP_400)

    @app.exception_handler(HTTPException)
    async def handle_http_exception(_request: Request, exc: HTTPException) -> Response:
        """Render routing and framework errors as TOML error bodies."""
        response = reply_from_error(exc.detail, exc.status_code)
        response.headers.update(exc.headers or {})
        return response

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> Response:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return reply_from_error("Internal server error", HTTP_500)
