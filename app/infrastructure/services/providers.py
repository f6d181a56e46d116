"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure
services, plus the request-scoped resolved locale.
"""

from functools import lru_cache
from pathlib import Path

from fastapi import Request

from infrastructure.configuration import Settings
from infrastructure.i18n import Locale, TranslationService
from infrastructure.i18n.factory import create_translator


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    Infrastructure packages should use this directly:
        from infrastructure.services.providers import get_settings
        settings = get_settings()

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/version")
        def get_version(settings: SettingsDep):
            return {"version": settings.GIT_SHA}

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translation_service() -> TranslationService:
    """
    Get application-scoped translation service singleton.

    Translations are loaded once per process from
    ``settings.localization.TRANSLATIONS_DIR`` (default: app/locales).

    Returns:
        TranslationService: Cached service with all locales preloaded.
    """
    translations_dir = get_settings().localization.TRANSLATIONS_DIR
    translator = create_translator(
        translations_dir=Path(translations_dir) if translations_dir else None
    )
    return TranslationService(translator=translator)


def get_resolved_locale(request: Request) -> Locale:
    """
    Get the locale resolved by the locale route middleware for this request.

    Pages take the locale from here and never derive it themselves.

    Raises:
        RuntimeError: If the route is not mounted beneath the locale middleware.
    """
    locale = getattr(request.state, "locale", None)
    if locale is None:
        raise RuntimeError(
            f"No resolved locale for {request.url.path}; page routes must be "
            "served through LocaleRouteMiddleware"
        )
    return locale
