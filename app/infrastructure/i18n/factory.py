"""Builds the Translator used by the web app."""

from pathlib import Path
from typing import Optional

from infrastructure.i18n.loader import YAMLTranslationLoader
from infrastructure.i18n.models import DEFAULT_LOCALE, Locale
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger

logger = get_module_logger()

# app/locales
DEFAULT_TRANSLATIONS_DIR = Path(__file__).resolve().parents[2] / "locales"


def create_translator(
    translations_dir: Optional[Path] = None,
    fallback_locale: Locale = DEFAULT_LOCALE,
    use_cache: bool = True,
    preload: bool = True,
) -> Translator:
    """Create a Translator over the YAML catalogs in ``translations_dir``.

    Args:
        translations_dir: Catalog directory; the bundled app/locales by default.
        fallback_locale: Locale consulted for keys missing elsewhere (fr).
        use_cache: Keep parsed catalogs in memory.
        preload: Load every locale now rather than on demand.

    Raises:
        ValueError: If the directory does not exist, or if ``preload`` is
            set and it holds no catalog at all.
    """
    directory = translations_dir or DEFAULT_TRANSLATIONS_DIR
    translator = Translator(
        loader=YAMLTranslationLoader(directory, use_cache=use_cache),
        fallback_locale=fallback_locale,
    )
    if preload:
        translator.load_all()
    logger.info(
        "translator_created",
        translations_dir=str(directory),
        preloaded=preload,
        locales=[locale.value for locale in translator.get_available_locales()],
    )
    return translator
