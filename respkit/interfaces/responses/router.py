"""
FastAPI router for the responses context.

Routes delegate to use cases and answer through the registered
responses. No business logic here.
"""

from fastapi import APIRouter, Depends
from starlette.responses import Response

from respkit.application.responses.list_responses import ListResponsesUseCase
from respkit.interfaces.responses.dependencies import (
    get_list_responses_use_case,
    get_response,
)
from respkit.interfaces.responses.outgoing import PendingResponse
from respkit.interfaces.responses.schemas import (
    ErrorResponse,
    ResponseItem,
    ResponseListResponse,
)

router = APIRouter(prefix="/responses", tags=["responses"])


@router.get(
    "",
    response_model=ResponseListResponse,
    responses={500: {"model": ErrorResponse}},
    summary="List registered responses",
    description="Names callable on the response handle, built-in or custom.",
)
def list_responses(
    res: PendingResponse = Depends(get_response),
    use_case: ListResponsesUseCase = Depends(get_list_responses_use_case),
) -> Response:
    """List every registered response."""
    summaries = use_case.execute()
    return res.ok(
        ResponseListResponse(
            responses=[
                ResponseItem(name=s.name, is_built_in=s.is_built_in)
                for s in summaries
            ]
        )
    )
