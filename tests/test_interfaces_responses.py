"""
Tests for the outgoing response handle and content negotiation.
"""

import threading

import pytest

from respkit.core.config import Settings
from respkit.domain.responses.errors import (
    ResponseAlreadySentError,
    ResponseNameConflictError,
    UnknownResponseError,
)
from respkit.domain.responses.registry import ResponseRegistry
from respkit.interfaces.responses.negotiation import wants_json
from respkit.interfaces.responses.outgoing import Responder, build_templates
from tests.conftest import BROWSER_HEADERS, JSON_HEADERS, make_request


class TestWantsJson:
    """Tests for wants_json."""

    @pytest.mark.parametrize(
        "headers,expected",
        [
            ({}, True),
            (JSON_HEADERS, True),
            (BROWSER_HEADERS, False),
            ({**BROWSER_HEADERS, "x-requested-with": "XMLHttpRequest"}, True),
            ({**BROWSER_HEADERS, "content-type": "application/json"}, True),
            ({"accept": "*/*"}, True),
        ],
    )
    def test_negotiation(self, headers, expected) -> None:
        assert wants_json(make_request(headers)) is expected


class TestPendingResponse:
    """Tests for the PendingResponse primitives and attribute surface."""

    def test_registered_names_are_attributes(self, make_response) -> None:
        res = make_response(JSON_HEADERS)

        assert callable(res.not_found)
        assert hasattr(res, "server_error")

    def test_unknown_attribute_raises_attribute_error(self, make_response) -> None:
        res = make_response()

        assert not hasattr(res, "teapot")
        with pytest.raises(AttributeError):
            res.teapot()

    def test_invoke_unknown_raises_unknown_response(self, make_response) -> None:
        with pytest.raises(UnknownResponseError):
            make_response().invoke("teapot")

    def test_handler_sees_its_own_request_and_response(self, registry, make_response) -> None:
        seen = {}

        def capture(context):
            seen["request"] = context.request
            seen["response"] = context.response
            seen["name"] = context.name
            return context.response.send_status(202)

        registry.register("capture", capture)
        res = make_response(path="/orders")

        response = res.capture()

        assert seen == {"request": res.request, "response": res, "name": "capture"}
        assert response.status_code == 202
        assert response.body == b"Accepted"

    def test_handler_returning_none_yields_response(self, registry, make_response) -> None:
        def quiet(context):
            context.response.status(204).send(None)

        registry.register("quiet", quiet)

        response = make_response().quiet()

        assert response.status_code == 204

    def test_headers_are_sent(self, make_response) -> None:
        res = make_response(JSON_HEADERS)
        res.set_header("Retry-After", "30")

        response = res.ok({"queued": True})

        assert response.headers["retry-after"] == "30"

    def test_sending_twice_fails(self, make_response) -> None:
        res = make_response(JSON_HEADERS)
        res.ok()

        with pytest.raises(ResponseAlreadySentError):
            res.not_found()

    def test_settings_are_exposed(self, make_response) -> None:
        res = make_response(environment="production")

        assert res.is_production is True
        assert res.settings.environment == "production"

    def test_concurrent_requests_do_not_share_state(self, registry, make_response) -> None:
        """Two requests handled at once each finalize their own response."""
        barrier = threading.Barrier(2, timeout=5)

        def tagged(context):
            tag = context.request.headers["x-request-id"]
            barrier.wait()
            context.response.set_header("X-Request-Id", tag)
            return context.response.ok({"tag": tag})

        registry.register("tagged", tagged)
        responses = {
            tag: make_response({"x-request-id": tag, **JSON_HEADERS}) for tag in ("a", "b")
        }
        results = {}

        def run(tag: str) -> None:
            results[tag] = responses[tag].tagged()

        threads = [threading.Thread(target=run, args=(tag,)) for tag in responses]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        for tag, res in responses.items():
            assert res.body == {"tag": tag}
            assert res.headers == {"X-Request-Id": tag}
            assert results[tag].headers["x-request-id"] == tag


class TestResponder:
    """Tests for the Responder factory."""

    def test_reserved_names_fail_startup(self) -> None:
        registry = ResponseRegistry()
        registry.register("json", lambda context: None)
        registry.register("status", lambda context: None)

        with pytest.raises(ResponseNameConflictError) as exc_info:
            Responder(registry, Settings(), build_templates())

        assert exc_info.value.names == ["json", "status"]

    def test_class_only_names_are_allowed(self) -> None:
        """Names found only on the metaclass do not shadow instance attributes."""
        registry = ResponseRegistry()
        registry.register("mro", lambda context: context.response.send_status(202))

        responder = Responder(registry, Settings(), build_templates())
        response = responder.for_request(make_request()).mro()

        assert response.status_code == 202

    def test_each_request_gets_a_fresh_response(self, registry) -> None:
        responder = Responder(registry, Settings(), build_templates())
        request = make_request()

        first = responder.for_request(request)
        second = responder.for_request(request)

        assert first is not second
        assert first.status_code == second.status_code == 200
