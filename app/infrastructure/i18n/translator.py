"""Translation lookup with fallback and ``{{variable}}`` interpolation."""

import re
from typing import Any, Dict, Mapping, Optional

from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import (
    DEFAULT_LOCALE,
    Locale,
    TranslationCatalog,
    TranslationKey,
)
from infrastructure.logging import get_module_logger

logger = get_module_logger()

_PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")


def interpolate(message: str, variables: Mapping[str, Any]) -> str:
    """Replace ``{{name}}`` placeholders.

    Raises:
        ValueError: If a placeholder has no value in ``variables``.
    """
    for name in _PLACEHOLDER.findall(message):
        if name not in variables:
            logger.error(
                "missing_interpolation_variable",
                variable=name,
                available_variables=sorted(variables),
            )
            raise ValueError(f"Missing interpolation variable: {name}")
    return _PLACEHOLDER.sub(lambda match: str(variables[match.group(1)]), message)


class Translator:
    """Per-locale catalogs plus a fallback locale.

    Attributes:
        loader: Where catalogs come from.
        catalogs: Catalogs loaded so far, by locale.
        fallback_locale: Consulted when the requested locale lacks a key.
    """

    def __init__(self, loader: TranslationLoader, fallback_locale: Locale = DEFAULT_LOCALE):
        self.loader = loader
        self.fallback_locale = fallback_locale
        self.catalogs: Dict[Locale, TranslationCatalog] = {}

    def load_all(self) -> None:
        self.catalogs = self.loader.load_all()

    def translate_message(
        self,
        key: TranslationKey,
        locale: Locale,
        variables: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Look ``key`` up in ``locale``, then in the fallback locale.

        Raises:
            KeyError: If neither locale has the key.
            ValueError: If a placeholder has no matching variable.
        """
        message = self._lookup(key, locale)
        if message is None and locale is not self.fallback_locale:
            message = self._lookup(key, self.fallback_locale)
            if message is not None:
                logger.debug(
                    "translation_fell_back",
                    key=str(key),
                    locale=locale.value,
                    fallback_locale=self.fallback_locale.value,
                )
        if message is None:
            logger.error("translation_not_found", key=str(key), locale=locale.value)
            raise KeyError(f"No translation for {key} in {locale.value}")
        return interpolate(message, variables or {})

    def has_message(self, key: TranslationKey, locale: Locale) -> bool:
        """True if ``locale`` itself defines ``key``."""
        catalog = self.catalogs.get(locale)
        return catalog is not None and catalog.has_message(key)

    def get_available_locales(self) -> list[Locale]:
        return list(self.catalogs)

    def _lookup(self, key: TranslationKey, locale: Locale) -> Optional[str]:
        catalog = self.catalogs.get(locale)
        return catalog.get_message(key) if catalog is not None else None
