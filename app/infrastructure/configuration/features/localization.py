"""Localization feature settings for the locale-aware router."""

import json
from typing import Annotated, Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import NoDecode
import structlog

from infrastructure.configuration.base import FeatureSettings

logger = structlog.stdlib.get_logger().bind(component="config.localization")

DEFAULT_EXEMPT_PATH_PREFIXES = [
    "/health",
    "/version",
    "/locale",
    "/api",
    "/static",
    "/docs",
    "/openapi.json",
    "/service-worker.js",
    "/manifest.json",
]


class LocalizationSettings(FeatureSettings):
    """Configuration for locale negotiation and the locale route wrapper.

    The set of supported locales and the default locale are fixed by
    ``infrastructure.i18n.models.Locale`` and are not configurable.

    Environment Variables:
        LOCALE_QUERY_PARAMETER: Query string parameter carrying a locale hint
        LOCALE_COOKIE_NAME: Cookie used both as a hint and as the locale cache
        LOCALE_STORAGE_HEADER: Header a client uses to forward its stored preference
        LOCALE_COOKIE_MAX_AGE_SECONDS: Lifetime of the locale cookie
        LOCALE_EXEMPT_PATH_PREFIXES: JSON list (or comma separated string) of
            path prefixes that are not page routes and bypass the route wrapper
        LOCALE_TRANSLATIONS_DIR: Directory containing <namespace>.<locale>.yml files

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        cookie_name = settings.localization.COOKIE_NAME
        ```
    """

    QUERY_PARAMETER: str = Field(default="lng", alias="LOCALE_QUERY_PARAMETER")
    COOKIE_NAME: str = Field(default="i18next", alias="LOCALE_COOKIE_NAME")
    STORAGE_HEADER: str = Field(
        default="X-Locale-Preference", alias="LOCALE_STORAGE_HEADER"
    )
    STORAGE_KEY: str = Field(default="i18nextLng", alias="LOCALE_STORAGE_KEY")
    COOKIE_MAX_AGE_SECONDS: int = Field(
        default=365 * 24 * 60 * 60, alias="LOCALE_COOKIE_MAX_AGE_SECONDS"
    )
    EXEMPT_PATH_PREFIXES: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_EXEMPT_PATH_PREFIXES),
        alias="LOCALE_EXEMPT_PATH_PREFIXES",
    )
    TRANSLATIONS_DIR: Optional[str] = Field(
        default=None, alias="LOCALE_TRANSLATIONS_DIR"
    )

    @field_validator("EXEMPT_PATH_PREFIXES", mode="before")
    @classmethod
    def _parse_exempt_prefixes(cls, v: Optional[Any]) -> Any:
        """Parse LOCALE_EXEMPT_PATH_PREFIXES from JSON, CSV or a list."""
        if v is None:
            return list(DEFAULT_EXEMPT_PATH_PREFIXES)
        if isinstance(v, (list, tuple)):
            return list(v)
        if isinstance(v, str):
            s = v.strip()
            if not s:
                return []
            if s.startswith("["):
                try:
                    return json.loads(s)
                except (json.JSONDecodeError, ValueError) as e:
                    raise ValueError(
                        f"Invalid LOCALE_EXEMPT_PATH_PREFIXES JSON: {e} (value: {s[:80]}...)"
                    ) from e
            return [part.strip() for part in s.split(",") if part.strip()]
        raise ValueError("LOCALE_EXEMPT_PATH_PREFIXES must be a JSON list or a string")

    @field_validator("EXEMPT_PATH_PREFIXES", mode="after")
    @classmethod
    def _validate_exempt_prefixes(cls, v: list[str]) -> list[str]:
        """Every prefix must be an absolute path; trailing slashes are dropped."""
        cleaned = []
        for prefix in v:
            if not prefix.startswith("/"):
                raise ValueError(
                    f"Exempt path prefix must start with '/': {prefix!r}"
                )
            cleaned.append(prefix.rstrip("/") or "/")
        if "/" in cleaned:
            logger.warning(
                "exempt_prefix_covers_all_routes",
                msg="Route wrapper is disabled for every path",
            )
        return cleaned
