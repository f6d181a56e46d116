"""Server and development infrastructure settings."""

from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import NoDecode

from infrastructure.configuration.base import InfrastructureSettings


class ServerSettings(InfrastructureSettings):
    """HTTP server runtime configuration.

    Environment Variables:
        BACKEND_URL: Public base URL of the web app (default: http://127.0.0.1:8000)
        CORS_ALLOWED_ORIGINS: Comma separated origins allowed outside production
        SYSTEM_RATE_LIMIT: slowapi limit applied to the system routes

    Example:
        ```python
        from infrastructure.services import get_settings

        backend_url = get_settings().server.BACKEND_URL
        ```
    """

    BACKEND_URL: str = Field(default="http://127.0.0.1:8000", alias="BACKEND_URL")
    CORS_ALLOWED_ORIGINS: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:8000", "http://127.0.0.1:8000"],
        alias="CORS_ALLOWED_ORIGINS",
    )
    SYSTEM_RATE_LIMIT: str = Field(default="50/minute", alias="SYSTEM_RATE_LIMIT")

    @field_validator("CORS_ALLOWED_ORIGINS", mode="before")
    @classmethod
    def _split_origins(cls, v):
        """Accept a comma separated string as well as a list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v
