"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
Returns application status, version and environment.
"""

from fastapi import APIRouter, Request

from respkit.interfaces.responses.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and version.",
)
def health_check(request: Request) -> HealthResponse:
    """Return current application health status."""
    app_settings = request.app.state.settings
    return HealthResponse(
        status="ok",
        version=app_settings.version,
        environment=app_settings.environment,
    )
