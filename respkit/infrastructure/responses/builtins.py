"""
Built-in response handlers.

Every handler takes an InvocationContext first and finalizes
``context.response``: it assigns the status code, then negotiates the
body (JSON for API clients, a rendered template for browsers, JSON again
when no template exists). Error details are only serialized outside
production.
"""

import logging
import traceback
from http import HTTPStatus
from typing import Any

from respkit.domain.responses.entities import InvocationContext, ResponseImplementation
from respkit.domain.responses.ports import ResponseSource

logger = logging.getLogger(__name__)

HTTP_200 = 200
HTTP_201 = 201
HTTP_400 = 400
HTTP_403 = 403
HTTP_404 = 404
HTTP_500 = 500


def _reason(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def _error_payload(
    error: BaseException, status_code: int, is_production: bool
) -> dict[str, Any]:
    """Turn an exception into a body that is safe for the environment."""
    payload: dict[str, Any] = {"error": _reason(status_code)}
    if not is_production:
        payload["detail"] = str(error)
        payload["type"] = type(error).__name__
    return payload


def _negotiate(
    context: InvocationContext,
    status_code: int,
    data: Any,
    template: str | None,
) -> Any:
    """Send ``data`` as a template when the client wants HTML, else as JSON."""
    response = context.response
    response.status(status_code)
    if template and not response.wants_json and response.has_view(template):
        return response.view(
            template, {"data": data, "status_code": status_code}
        )
    return response.json({} if data is None else data)


def _error_status(
    context: InvocationContext, status_code: int, data: Any
) -> Any:
    if isinstance(data, BaseException):
        data = _error_payload(data, status_code, context.response.is_production)
    logger.log(
        logging.WARNING if status_code >= HTTP_500 else logging.DEBUG,
        "Sending %d (%s) response",
        status_code,
        _reason(status_code),
    )
    return _negotiate(context, status_code, data, f"{status_code}.html")


def ok(context: InvocationContext, data: Any = None, view: str | None = None) -> Any:
    """Send a 200 response."""
    return _negotiate(context, HTTP_200, data, view)


def created(
    context: InvocationContext, data: Any = None, view: str | None = None
) -> Any:
    """Send a 201 response for a newly created resource."""
    return _negotiate(context, HTTP_201, data, view)


def bad_request(context: InvocationContext, data: Any = None) -> Any:
    """Send a 400 response; ``data`` usually describes what was wrong."""
    return _error_status(context, HTTP_400, data)


def forbidden(context: InvocationContext, data: Any = None) -> Any:
    """Send a 403 response."""
    return _error_status(context, HTTP_403, data)


def not_found(context: InvocationContext, data: Any = None) -> Any:
    """Send a 404 response."""
    return _error_status(context, HTTP_404, data)


def server_error(context: InvocationContext, data: Any = None) -> Any:
    """Send a 500 response.

    In production the body is always the generic message, whatever
    ``data`` holds. In development the error message, type and
    traceback are included.
    """
    if isinstance(data, BaseException):
        logger.error(
            "Sending 500 (Internal Server Error) response: %s",
            type(data).__name__,
            exc_info=(type(data), data, data.__traceback__),
        )
    else:
        logger.error("Sending 500 (Internal Server Error) response")

    payload: dict[str, Any] = {"error": "Internal server error"}
    if not context.response.is_production and data is not None:
        if isinstance(data, BaseException):
            payload["detail"] = str(data)
            payload["type"] = type(data).__name__
            payload["traceback"] = traceback.format_exception(
                type(data), data, data.__traceback__
            )
        else:
            payload["detail"] = data
    return _negotiate(context, HTTP_500, payload, "500.html")


def negotiate(context: InvocationContext, error: Any) -> Any:
    """Pick a response from the status carried by ``error``.

    ``error.status_code`` (or ``error.status``) selects bad_request,
    forbidden, not_found or server_error. Other error codes keep their
    status with a negotiated error body; codes below 400 are sent without
    a body. Errors carrying no status become a server error.
    """
    status_code = getattr(error, "status_code", None) or getattr(
        error, "status", None
    )
    if not isinstance(status_code, int) or status_code == HTTP_500:
        return context.response.invoke("server_error", error)
    if status_code < HTTP_400:
        return context.response.status(status_code).send(None)

    detail = getattr(error, "detail", None)
    data = error
    if detail is not None:
        data = {"error": _reason(status_code), "detail": detail}

    by_status = {
        HTTP_400: "bad_request",
        HTTP_403: "forbidden",
        HTTP_404: "not_found",
    }
    name = by_status.get(status_code)
    if name is not None:
        return context.response.invoke(name, data)
    return _error_status(context, status_code, data)


BUILTIN_RESPONSES: dict[str, ResponseImplementation] = {
    "ok": ok,
    "created": created,
    "bad_request": bad_request,
    "forbidden": forbidden,
    "not_found": not_found,
    "server_error": server_error,
    "negotiate": negotiate,
}


class BuiltinResponseSource(ResponseSource):
    """Provides the baseline responses shipped with the package."""

    is_built_in = True

    def load(self) -> list[tuple[str, ResponseImplementation]]:
        return list(BUILTIN_RESPONSES.items())
