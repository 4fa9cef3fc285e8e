"""
Dependency injection for the responses context.

Provides FastAPI dependency functions that hand the per-request
response handle and the use cases to route functions.
"""

from fastapi import Request

from respkit.application.responses.list_responses import ListResponsesUseCase
from respkit.interfaces.responses.outgoing import PendingResponse, Responder


def get_responder(request: Request) -> Responder:
    """Return the application's Responder."""
    return request.app.state.responder


def get_response(request: Request) -> PendingResponse:
    """Build the outgoing response handle for the current request.

    Usage:

        @router.get("/accounts/{account_id}")
        def read_account(account_id: str, res: PendingResponse = Depends(get_response)):
            return res.not_found()
    """
    return get_responder(request).for_request(request)


def get_list_responses_use_case(request: Request) -> ListResponsesUseCase:
    """Build ListResponsesUseCase with the application's registry."""
    return ListResponsesUseCase(registry=get_responder(request).registry)
