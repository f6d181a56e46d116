"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the fare
estimator using Pydantic BaseSettings with domain-based organization.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    LocalizationSettings: Locale routing settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()
    query_parameter = settings.localization.QUERY_PARAMETER
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.features.localization import LocalizationSettings

__all__ = ["Settings", "settings", "LocalizationSettings"]
