"""
The outgoing response handle.

A PendingResponse is created for every request. Route functions call
registered responses as attributes (``res.not_found()``,
``res.insufficient_funds(err, extra)``); each call builds a fresh
InvocationContext carrying this request and this response and dispatches
it through the registry. Handlers mutate the pending response through
the primitives below and get back a Starlette Response.
"""

import functools
import logging
from http import HTTPStatus
from pathlib import Path
from typing import Any

from fastapi.encoders import jsonable_encoder
from jinja2 import TemplateNotFound
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.templating import Jinja2Templates

from respkit.core.config import Settings
from respkit.domain.responses.entities import InvocationContext
from respkit.domain.responses.errors import (
    ResponseAlreadySentError,
    ResponseNameConflictError,
)
from respkit.domain.responses.registry import ResponseRegistry
from respkit.interfaces.responses.negotiation import wants_json

logger = logging.getLogger(__name__)

BUNDLED_TEMPLATES_DIR = Path(__file__).resolve().parents[2] / "templates"
JSON_MEDIA_TYPE = "application/json"
HTML_MEDIA_TYPE = "text/html"


def build_templates(templates_dir: Path | None = None) -> Jinja2Templates:
    """Build the template loader, searching ``templates_dir`` first."""
    directories = [BUNDLED_TEMPLATES_DIR]
    if templates_dir is not None:
        directories.insert(0, Path(templates_dir))
    return Jinja2Templates(directory=directories)


class PendingResponse:
    """Mutable response being built for one request.

    Registered response names are reachable as attributes. Unknown
    attributes raise AttributeError; ``invoke`` raises
    UnknownResponseError instead.
    """

    __slots__ = (
        "_request",
        "_responder",
        "status_code",
        "headers",
        "body",
        "media_type",
        "sent",
    )

    def __init__(self, request: Request, responder: "Responder") -> None:
        self._request = request
        self._responder = responder
        self.status_code = 200
        self.headers: dict[str, str] = {}
        self.body: Any = None
        self.media_type: str | None = None
        self.sent = False

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        if self._responder.registry.resolve(name) is None:
            raise AttributeError(
                f"'{type(self).__name__}' has no attribute or response '{name}'"
            )
        return functools.partial(self.invoke, name)

    def __repr__(self) -> str:
        return (
            f"<PendingResponse {self.status_code} "
            f"{self.media_type or '-'} sent={self.sent}>"
        )

    @property
    def request(self) -> Request:
        return self._request

    @property
    def settings(self) -> Settings:
        return self._responder.settings

    @property
    def is_production(self) -> bool:
        return self._responder.settings.is_production

    @property
    def wants_json(self) -> bool:
        return wants_json(self._request)

    def invoke(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Dispatch the response ``name`` bound to this request/response.

        Returns:
            The handler's result. When a handler sends the response but
            returns None, the finished Starlette Response is returned.

        Raises:
            UnknownResponseError: If ``name`` is not registered.
            HandlerExecutionError: If the handler raises.
        """
        context = InvocationContext(request=self._request, response=self, name=name)
        result = self._responder.registry.invoke(name, context, *args, **kwargs)
        if result is None and self.sent:
            return self.to_response()
        return result

    def status(self, status_code: int) -> "PendingResponse":
        self.status_code = status_code
        return self

    def set_header(self, name: str, value: str) -> "PendingResponse":
        self.headers[name] = value
        return self

    def json(self, data: Any) -> Response:
        """Send ``data`` encoded as JSON."""
        self._mark_sent()
        self.body = jsonable_encoder(data)
        self.media_type = JSON_MEDIA_TYPE
        return self.to_response()

    def has_view(self, template: str) -> bool:
        try:
            self._responder.templates.get_template(template)
        except TemplateNotFound:
            return False
        return True

    def view(self, template: str, context: dict[str, Any] | None = None) -> Response:
        """Render ``template`` and send it as HTML.

        Raises:
            TemplateNotFound: If no template directory holds ``template``.
        """
        if self.sent:
            raise ResponseAlreadySentError()
        html = self._responder.templates.get_template(template).render(
            {**(context or {}), "request": self._request}
        )
        return self.send(html, HTML_MEDIA_TYPE)

    def send(self, content: Any, media_type: str | None = None) -> Response:
        """Send a raw body."""
        self._mark_sent()
        self.body = content
        self.media_type = media_type
        return self.to_response()

    def send_status(self, status_code: int) -> Response:
        """Send ``status_code`` with its reason phrase as plain text."""
        self.status(status_code)
        return self.send(HTTPStatus(status_code).phrase, "text/plain")

    def to_response(self) -> Response:
        """Build the Starlette Response for the current state."""
        if self.media_type == JSON_MEDIA_TYPE:
            return JSONResponse(
                content=self.body,
                status_code=self.status_code,
                headers=self.headers,
            )
        return Response(
            content=self.body,
            status_code=self.status_code,
            headers=self.headers,
            media_type=self.media_type,
        )

    def _mark_sent(self) -> None:
        if self.sent:
            raise ResponseAlreadySentError()
        self.sent = True


# Names an instance resolves without reaching __getattr__.
RESERVED_NAMES = frozenset(dir(PendingResponse))


class Responder:
    """Per-application factory of PendingResponse objects.

    Raises:
        ResponseNameConflictError: If a registered response name would
            be shadowed by a PendingResponse attribute.
    """

    def __init__(
        self,
        registry: ResponseRegistry,
        settings: Settings,
        templates: Jinja2Templates,
    ) -> None:
        conflicts = [name for name in registry.names() if name in RESERVED_NAMES]
        if conflicts:
            raise ResponseNameConflictError(conflicts)

        self.registry = registry
        self.settings = settings
        self.templates = templates

    def for_request(self, request: Request) -> PendingResponse:
        return PendingResponse(request, self)
