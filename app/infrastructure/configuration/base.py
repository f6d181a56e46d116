"""Base classes shared by every settings section."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Every section reads the same .env file; unknown variables are ignored.
SECTION_CONFIG = SettingsConfigDict(
    env_file=".env",
    case_sensitive=True,
    extra="ignore",
)


class FeatureSettings(BaseSettings):
    """Settings owned by a feature (locale routing, pages)."""

    model_config = SECTION_CONFIG


class InfrastructureSettings(BaseSettings):
    """Settings for the HTTP server and rate limiting."""

    model_config = SECTION_CONFIG
