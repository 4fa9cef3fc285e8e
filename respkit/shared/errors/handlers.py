"""
Centralized error handlers for FastAPI.

Routes every failure through the registered responses, so custom
overrides of server_error, not_found, bad_request and friends also shape
error pages. Internal details are only exposed outside production, and
that decision belongs to the responses themselves.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse, Response

from respkit.domain.responses.errors import (
    HandlerExecutionError,
    ResponseRegistryError,
)

logger = logging.getLogger(__name__)

HTTP_500 = 500


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def _respond(
    request: Request,
    name: str,
    *args: Any,
    headers: dict[str, str] | None = None,
) -> Response:
    """Answer ``request`` with the registered response ``name``.

    Falls back to a bare JSON 500 when the response itself fails.
    """
    responder = getattr(request.app.state, "responder", None)
    if responder is None:
        logger.error("No responder configured; cannot send '%s'", name)
        return _error_response(HTTP_500, "Internal server error")

    response = responder.for_request(request)
    for header_name, header_value in (headers or {}).items():
        response.set_header(header_name, header_value)

    try:
        result = response.invoke(name, *args)
    except Exception:
        logger.exception("Response '%s' failed while handling an error", name)
        return _error_response(HTTP_500, "Internal server error")

    if isinstance(result, Response):
        return result
    return response.to_response()


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(HandlerExecutionError)
    async def handle_handler_execution(
        request: Request, exc: HandlerExecutionError
    ) -> Response:
        """Handle failures raised inside a response handler."""
        logger.error("Response handler '%s' failed", exc.name)
        return _respond(request, "server_error", exc.original)

    @app.exception_handler(ResponseRegistryError)
    async def handle_registry_error(
        request: Request, exc: ResponseRegistryError
    ) -> Response:
        """Handle unknown responses and other registry misuse."""
        logger.error("Response registry error: %s", exc.message)
        return _respond(request, "server_error", exc)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> Response:
        """Send HTTP errors (unmatched routes included) through negotiate."""
        logger.debug("HTTP %d on %s", exc.status_code, request.url.path)
        return _respond(request, "negotiate", exc, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> Response:
        """Handle request validation failures."""
        logger.warning("Invalid request on %s", request.url.path)
        return _respond(
            request,
            "bad_request",
            {"error": "Invalid request", "detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> Response:
        """Catch-all for unexpected errors."""
        logger.error("Unexpected error: %s", type(exc).__name__)
        return _respond(request, "server_error", exc)
