"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here — no scattered magic strings.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

BASELINE_RESPONSES = [
    "ok",
    "created",
    "bad_request",
    "forbidden",
    "not_found",
    "server_error",
    "negotiate",
]


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        environment: "development" or "production". Production never
            serializes internal error details into response bodies.
        debug: Enable interactive docs. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        responses_dir: Directory holding one Python module per custom
            response. None disables custom responses.
        templates_dir: Directory searched for response templates before
            the bundled ones.
        required_responses: Names that must be registered at startup.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "respkit"
    version: str = "0.1.0"
    environment: Literal["development", "production"] = "development"
    debug: bool = False
    log_level: str = "INFO"
    responses_dir: Optional[Path] = None
    templates_dir: Optional[Path] = None
    required_responses: list[str] = list(BASELINE_RESPONSES)

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


settings = Settings()
