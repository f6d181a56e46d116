"""i18n system - locales, negotiation and translations.

Main components:
- models: Locale, LocaleHints, TranslationKey, TranslationCatalog
- resolvers: LocaleNegotiator, negotiate() and hint collectors
- state: ActiveLocaleStore, the accessor pair around the active locale
- loader / translator / service: YAML translation catalog lookups
"""

from infrastructure.i18n.loader import TranslationLoader, YAMLTranslationLoader
from infrastructure.i18n.models import (
    DEFAULT_LOCALE,
    SUPPORTED_LANGUAGES,
    SUPPORTED_LOCALES,
    LanguageOption,
    Locale,
    LocaleHints,
    TranslationCatalog,
    TranslationKey,
)
from infrastructure.i18n.resolvers import (
    BrowserContext,
    LocaleNegotiator,
    hints_from_request,
    negotiate,
    normalize_language_tag,
    parse_accept_language,
    raw_request_path,
)
from infrastructure.i18n.service import TranslationService
from infrastructure.i18n.state import ActiveLocaleStore
from infrastructure.i18n.translator import Translator

__all__ = [
    "DEFAULT_LOCALE",
    "SUPPORTED_LANGUAGES",
    "SUPPORTED_LOCALES",
    "LanguageOption",
    "Locale",
    "LocaleHints",
    "TranslationKey",
    "TranslationCatalog",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "Translator",
    "TranslationService",
    "ActiveLocaleStore",
    "BrowserContext",
    "LocaleNegotiator",
    "hints_from_request",
    "negotiate",
    "normalize_language_tag",
    "parse_accept_language",
    "raw_request_path",
]
