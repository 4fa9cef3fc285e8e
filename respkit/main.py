"""
Application entry point.

Creates the FastAPI application and wires together:
- The response registry (built-ins plus the custom responses directory)
- The per-request response handle factory
- Error handlers (every failure answered by a registered response)
- Logging configuration
- Routers

No business logic belongs here.
"""

from fastapi import FastAPI

from respkit.application.responses.build_registry import (
    BuildResponseRegistryUseCase,
)
from respkit.core.config import Settings, settings
from respkit.infrastructure.responses.builtins import BuiltinResponseSource
from respkit.infrastructure.responses.directory_source import (
    DirectoryResponseSource,
)
from respkit.interfaces.health import router as health_router
from respkit.interfaces.responses.outgoing import Responder, build_templates
from respkit.interfaces.responses.router import router as responses_router
from respkit.shared.errors.handlers import register_error_handlers
from respkit.shared.logging import configure_logging


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Builds and freezes the response registry before any request is
    served, so configuration errors surface here rather than on first use.
    This is the composition root of the application.

    Args:
        app_settings: Settings to use instead of the environment-loaded ones.

    Returns:
        A fully configured FastAPI application instance.

    Raises:
        ResponseLoadError: If a custom response module cannot be loaded.
        MissingBaselineResponsesError: If a required response is missing.
        ResponseNameConflictError: If a response name is reserved.
    """
    app_settings = app_settings or settings
    configure_logging(
        level=app_settings.log_level, environment=app_settings.environment
    )

    registry = BuildResponseRegistryUseCase(
        sources=[
            BuiltinResponseSource(),
            DirectoryResponseSource(app_settings.responses_dir),
        ],
        required_names=app_settings.required_responses,
    ).execute()

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
    )

    # --- Responses ---
    app.state.settings = app_settings
    app.state.responder = Responder(
        registry=registry,
        settings=app_settings,
        templates=build_templates(app_settings.templates_dir),
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(responses_router, prefix="/api/v1")

    return app


app = create_app()
