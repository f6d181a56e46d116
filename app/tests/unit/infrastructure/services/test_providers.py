"""
Unit tests for dependency injection providers.

Tests cover:
- get_settings() and get_translation_service() caching behavior
- get_resolved_locale() reading the middleware result
- Dependency override pattern for testing
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from infrastructure.configuration import Settings
from infrastructure.i18n import Locale, TranslationService
from infrastructure.services import (
    ResolvedLocaleDep,
    SettingsDep,
    TranslationServiceDep,
    get_resolved_locale,
    get_settings,
    get_translation_service,
)


class TestGetSettings:
    """Tests for get_settings() provider function."""

    def test_returns_settings_instance(self):
        assert isinstance(get_settings(), Settings)

    def test_returns_cached_instance(self):
        assert get_settings() is get_settings()

    def test_cache_can_be_cleared(self):
        instance1 = get_settings()
        get_settings.cache_clear()
        assert get_settings() is not instance1


class TestGetTranslationService:
    """Tests for get_translation_service() provider function."""

    def test_returns_loaded_service(self):
        service = get_translation_service()
        assert isinstance(service, TranslationService)
        assert service.translate("common.app_name", Locale.EN) == "Fare Estimator"

    def test_returns_cached_instance(self):
        assert get_translation_service() is get_translation_service()


class TestGetResolvedLocale:
    """Tests for get_resolved_locale()."""

    def test_returns_request_state_locale(self):
        request = MagicMock()
        request.state = SimpleNamespace(locale=Locale.EN)
        assert get_resolved_locale(request) is Locale.EN

    def test_raises_without_middleware(self):
        request = MagicMock()
        request.state = SimpleNamespace()
        with pytest.raises(RuntimeError, match="LocaleRouteMiddleware"):
            get_resolved_locale(request)


class TestDependencyAliases:
    """The Annotated aliases resolve through FastAPI and can be overridden."""

    @pytest.fixture
    def app(self):
        app = FastAPI()

        @app.get("/cookie-name")
        def cookie_name(settings: SettingsDep):
            return {"cookie": settings.localization.COOKIE_NAME}

        @app.get("/title")
        def title(locale: ResolvedLocaleDep, translation: TranslationServiceDep):
            return {"title": translation.translate("pages.pricing_title", locale)}

        return app

    def test_settings_dep(self, app):
        response = TestClient(app).get("/cookie-name")
        assert response.json() == {"cookie": "i18next"}

    def test_overrides(self, app):
        translation = MagicMock()
        translation.translate.return_value = "Tarifs"
        app.dependency_overrides[get_resolved_locale] = lambda: Locale.FR
        app.dependency_overrides[get_translation_service] = lambda: translation

        response = TestClient(app).get("/title")

        assert response.json() == {"title": "Tarifs"}
        translation.translate.assert_called_once_with("pages.pricing_title", Locale.FR)

    def test_resolved_locale_missing_fails_loudly(self, app):
        client = TestClient(app, raise_server_exceptions=True)
        with pytest.raises(RuntimeError):
            client.get("/title")
