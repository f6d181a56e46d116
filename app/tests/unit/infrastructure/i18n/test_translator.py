"""Tests for infrastructure.i18n.translator and service modules."""

from unittest.mock import MagicMock

import pytest

from infrastructure.i18n import Locale, TranslationService, Translator
from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.models import TranslationKey


class TestTranslator:
    """Tests for Translator."""

    @pytest.fixture
    def translator(self, yaml_loader):
        """Create Translator instance with test loader."""
        translator = Translator(yaml_loader)
        translator.load_all()
        return translator

    def test_translator_initialization(self, yaml_loader):
        translator = Translator(yaml_loader)
        assert translator.loader is yaml_loader
        assert translator.fallback_locale is Locale.FR
        assert translator.catalogs == {}

    def test_load_all(self, translator):
        assert set(translator.get_available_locales()) == {Locale.FR, Locale.EN}

    def test_load_all_replaces_catalogs(self, translator):
        translator.catalogs = {Locale.EN: translator.catalogs[Locale.EN]}
        translator.load_all()
        assert set(translator.get_available_locales()) == {Locale.FR, Locale.EN}

    def test_translate_message_with_variables(self, translator):
        key = TranslationKey("pages", "trip_summary")
        message = translator.translate_message(
            key, Locale.EN, variables={"distance": 12, "city": "Lyon"}
        )
        assert message == "12 km trip to Lyon"

    def test_placeholder_whitespace_is_tolerated(self, yaml_loader):
        translator = Translator(yaml_loader)
        translator.load_all()
        translator.catalogs[Locale.EN].merge("pages", {"spaced": "Hi {{ name }}"})

        message = translator.translate_message(
            TranslationKey("pages", "spaced"), Locale.EN, {"name": "Ana"}
        )

        assert message == "Hi Ana"

    def test_falls_back_to_default_locale(self, translator):
        """A key missing in English is served from the French catalog."""
        message = translator.translate_message(TranslationKey("pages", "fr_only"), Locale.EN)
        assert message == "Seulement en français"

    def test_missing_everywhere_raises_key_error(self, translator):
        with pytest.raises(KeyError):
            translator.translate_message(TranslationKey("pages", "nope"), Locale.EN)

    def test_missing_variable_raises_value_error(self, translator):
        with pytest.raises(ValueError, match="distance"):
            translator.translate_message(
                TranslationKey("pages", "trip_summary"), Locale.FR, {"city": "Paris"}
            )

    def test_has_message_does_not_fall_back(self, translator):
        key = TranslationKey("pages", "fr_only")
        assert translator.has_message(key, Locale.FR) is True
        assert translator.has_message(key, Locale.EN) is False


class TestCreateTranslator:
    """Tests for the translator factory."""

    def test_preloads_by_default(self, temp_translations_dir):
        translator = create_translator(translations_dir=temp_translations_dir)
        assert set(translator.get_available_locales()) == {Locale.FR, Locale.EN}

    def test_lazy_translator_has_no_catalogs(self, temp_translations_dir):
        translator = create_translator(
            translations_dir=temp_translations_dir, preload=False
        )
        assert translator.catalogs == {}

    def test_default_directory_is_bundled(self):
        translator = create_translator()
        assert set(translator.get_available_locales()) == {Locale.FR, Locale.EN}


class TestTranslationService:
    """Tests for TranslationService."""

    @pytest.fixture
    def service(self, temp_translations_dir):
        return TranslationService(create_translator(translations_dir=temp_translations_dir))

    def test_translate_accepts_string_key(self, service):
        assert service.translate("pages.estimate_title", Locale.EN) == "Estimate a fare"

    def test_translate_accepts_translation_key(self, service):
        key = TranslationKey("pages", "estimate_title")
        assert service.translate(key, Locale.FR) == "Estimer un tarif"

    def test_for_locale_binds_locale(self, service):
        t = service.for_locale(Locale.FR)
        assert t("pages.trip_summary", distance=3, city="Nice") == "Trajet de 3 km vers Nice"

    def test_has_message(self, service):
        assert service.has_message("pages.fr_only", Locale.FR) is True
        assert service.has_message("pages.fr_only", Locale.EN) is False

    def test_translator_property(self):
        translator = MagicMock(spec=Translator)
        service = TranslationService(translator=translator)
        assert service.translator is translator

    def test_delegates_to_translator(self):
        translator = MagicMock(spec=Translator)
        translator.translate_message.return_value = "ok"
        service = TranslationService(translator=translator)

        assert service.translate("nav.home", Locale.EN, x=1) == "ok"
        translator.translate_message.assert_called_once_with(
            TranslationKey("nav", "home"), Locale.EN, {"x": 1}
        )
