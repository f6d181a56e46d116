"""Reading translation catalogs from disk.

Catalog files are named ``<namespace>.<locale>.yml`` (``pages.fr.yml``).
Each file maps one or more namespaces to flat message dictionaries; every
file of a locale is merged into a single TranslationCatalog.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Union

import structlog
import yaml

from infrastructure.i18n.models import Locale, TranslationCatalog

logger = structlog.get_logger().bind(component="i18n.loader")

CATALOG_SUFFIX = ".yml"


class TranslationLoader(ABC):
    """Source of translation catalogs."""

    @abstractmethod
    def load(self, locale: Locale) -> TranslationCatalog:
        """Return the catalog for ``locale``.

        Raises:
            FileNotFoundError: When the locale has no catalog files.
            ValueError: When a catalog file cannot be parsed.
        """

    @abstractmethod
    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Return catalogs for every locale that has one."""


def read_catalog_file(path: Path) -> Any:
    """Parse one YAML catalog file.

    Raises:
        ValueError: On malformed YAML.
    """
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        logger.error("catalog_parse_failed", file=str(path), error=str(exc))
        raise ValueError(f"Failed to parse {path}: {exc}") from exc


class YAMLTranslationLoader(TranslationLoader):
    """Loads and merges the YAML catalog files found in one directory.

    Attributes:
        translations_dir: Directory holding the catalog files.
        use_cache: Keep parsed catalogs in memory between calls.
        cache: Parsed catalogs by locale.
    """

    def __init__(self, translations_dir: Union[str, Path], use_cache: bool = True):
        self.translations_dir = Path(translations_dir)
        if not self.translations_dir.is_dir():
            raise ValueError(f"Translations directory not found: {self.translations_dir}")
        self.use_cache = use_cache
        self.cache: Dict[Locale, TranslationCatalog] = {}
        logger.debug(
            "catalog_loader_ready",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def files_for(self, locale: Locale) -> list[Path]:
        """Catalog files of ``locale``, in a stable order."""
        return sorted(self.translations_dir.glob(f"*.{locale.value}{CATALOG_SUFFIX}"))

    def load(self, locale: Locale) -> TranslationCatalog:
        cached = self.cache.get(locale) if self.use_cache else None
        if cached is not None:
            return cached

        files = self.files_for(locale)
        if not files:
            raise FileNotFoundError(
                f"No {locale.value} catalog files in {self.translations_dir}"
            )

        catalog = TranslationCatalog(locale=locale)
        for path in files:
            self._merge_file(catalog, path)

        logger.info(
            "catalog_loaded",
            locale=locale.value,
            files=[path.name for path in files],
            namespaces=sorted(catalog.messages),
        )
        if self.use_cache:
            self.cache[locale] = catalog
        return catalog

    def load_all(self) -> Dict[Locale, TranslationCatalog]:
        """Load each supported locale; locales without files are skipped.

        Raises:
            ValueError: When no locale at all has catalog files.
        """
        catalogs: Dict[Locale, TranslationCatalog] = {}
        for locale in Locale:
            try:
                catalogs[locale] = self.load(locale)
            except FileNotFoundError:
                logger.warning("catalog_missing", locale=locale.value)
        if not catalogs:
            raise ValueError(f"No translation files found in {self.translations_dir}")
        return catalogs

    def clear_cache(self) -> None:
        self.cache.clear()

    def _merge_file(self, catalog: TranslationCatalog, path: Path) -> None:
        data = read_catalog_file(path)
        if data is None:
            return
        if not isinstance(data, dict):
            logger.warning("catalog_not_a_mapping", file=path.name)
            return
        for namespace, messages in data.items():
            if isinstance(messages, dict):
                catalog.merge(namespace, messages)
            else:
                logger.warning("namespace_not_a_mapping", file=path.name, namespace=namespace)
