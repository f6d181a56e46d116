"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    ResolvedLocaleDep,
    SettingsDep,
    TranslationServiceDep,
)
from infrastructure.services.providers import (
    get_resolved_locale,
    get_settings,
    get_translation_service,
)

__all__ = [
    "ResolvedLocaleDep",
    "SettingsDep",
    "TranslationServiceDep",
    "get_resolved_locale",
    "get_settings",
    "get_translation_service",
]
