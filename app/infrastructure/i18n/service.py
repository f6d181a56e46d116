"""Translation service for dependency injection.

Provides a class-based interface to the i18n system for easier DI and testing.
"""

from typing import Any, Callable, Optional, Union

from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.models import Locale, TranslationKey
from infrastructure.i18n.translator import Translator

KeyLike = Union[str, TranslationKey]


class TranslationService:
    """Thin facade over a Translator.

    Pages never choose a locale themselves: they receive the resolved
    locale and ask for a bound lookup function.

    Usage:
        @router.get("/{lang}/pricing")
        def pricing(locale: ResolvedLocaleDep, translation: TranslationServiceDep):
            t = translation.for_locale(locale)
            return t("pages.pricing_title")
    """

    def __init__(self, translator: Optional[Translator] = None):
        """Initialize translation service.

        Args:
            translator: Optional pre-configured Translator instance.
                If not provided, creates default via factory.
        """
        self._translator = translator or create_translator()

    def translate(self, key: KeyLike, locale: Locale, **variables: Any) -> str:
        """Retrieve and interpolate a translated message.

        Raises:
            KeyError: If key not found in requested locale or fallback locale
        """
        if isinstance(key, str):
            key = TranslationKey.from_string(key)
        return self._translator.translate_message(key, locale, variables)

    def for_locale(self, locale: Locale) -> Callable[..., str]:
        """Return ``t(key, **variables)`` bound to ``locale``."""

        def t(key: KeyLike, **variables: Any) -> str:
            return self.translate(key, locale, **variables)

        return t

    def has_message(self, key: KeyLike, locale: Locale) -> bool:
        if isinstance(key, str):
            key = TranslationKey.from_string(key)
        return self._translator.has_message(key, locale)

    @property
    def translator(self) -> Translator:
        """Access underlying Translator instance."""
        return self._translator
