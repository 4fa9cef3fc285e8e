"""
Pydantic schemas for the responses API.

These schemas define the API contract.
No business logic belongs here.
"""

from pydantic import BaseModel, Field


class ResponseItem(BaseModel):
    """A single registered response."""

    name: str = Field(..., description="Response name on the response handle")
    is_built_in: bool = Field(..., description="Shipped with the package")


class ResponseListResponse(BaseModel):
    """Response schema for the registered responses endpoint."""

    responses: list[ResponseItem]


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str
    environment: str


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str
    detail: str | None = None
