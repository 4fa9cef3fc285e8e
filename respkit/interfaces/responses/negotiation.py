"""
Content negotiation for built-in responses.

Decides whether a request should get JSON or a rendered page.
"""

from starlette.requests import Request

XHR_HEADER_VALUE = "xmlhttprequest"


def wants_json(request: Request) -> bool:
    """Return True if the client should receive JSON.

    JSON is chosen for XHR requests, for clients that do not explicitly
    accept ``text/html``, and for JSON requests that send an Accept header.
    """
    headers = request.headers
    if headers.get("x-requested-with", "").lower() == XHR_HEADER_VALUE:
        return True

    accept = headers.get("accept", "").lower()
    if "text/html" not in accept:
        return True

    content_type = headers.get("content-type", "").lower()
    return "json" in content_type
