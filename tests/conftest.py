"""
Shared fixtures for the test suite.
"""

from typing import Callable

import pytest
from starlette.requests import Request

from respkit.core.config import Settings
from respkit.domain.responses.registry import ResponseRegistry
from respkit.infrastructure.responses.builtins import BUILTIN_RESPONSES
from respkit.interfaces.responses.outgoing import (
    PendingResponse,
    Responder,
    build_templates,
)

JSON_HEADERS = {"accept": "application/json"}
BROWSER_HEADERS = {"accept": "text/html,application/xhtml+xml,*/*;q=0.8"}


def make_request(
    headers: dict[str, str] | None = None, path: str = "/", method: str = "GET"
) -> Request:
    """Build a bare Starlette request from an ASGI scope."""
    scope = {
        "type": "http",
        "method": method,
        "path": path,
        "root_path": "",
        "scheme": "http",
        "server": ("testserver", 80),
        "query_string": b"",
        "headers": [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in (headers or {}).items()
        ],
    }
    return Request(scope)


def builtin_registry() -> ResponseRegistry:
    registry = ResponseRegistry()
    for name, implementation in BUILTIN_RESPONSES.items():
        registry.register(name, implementation, is_built_in=True)
    return registry


@pytest.fixture
def registry() -> ResponseRegistry:
    """An unfrozen registry holding the built-in responses."""
    return builtin_registry()


@pytest.fixture
def make_response(
    registry: ResponseRegistry,
) -> Callable[..., PendingResponse]:
    """Factory of PendingResponse objects bound to the ``registry`` fixture."""

    def factory(
        headers: dict[str, str] | None = None,
        environment: str = "development",
        path: str = "/",
    ) -> PendingResponse:
        responder = Responder(
            registry=registry,
            settings=Settings(environment=environment),
            templates=build_templates(),
        )
        return responder.for_request(make_request(headers, path=path))

    return factory
