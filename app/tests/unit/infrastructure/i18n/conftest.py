"""Feature-level fixtures for i18n system tests.

Provides translation files and hint collections for negotiation and
translation scenarios.
"""

import pytest
import yaml

from infrastructure.i18n import YAMLTranslationLoader


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - pages.fr.yml
    - pages.en.yml
    - common.fr.yml
    """
    fr_pages = {
        "pages": {
            "estimate_title": "Estimer un tarif",
            "trip_summary": "Trajet de {{distance}} km vers {{city}}",
            "fr_only": "Seulement en français",
        }
    }
    with open(tmp_path / "pages.fr.yml", "w", encoding="utf-8") as f:
        yaml.dump(fr_pages, f, allow_unicode=True)

    en_pages = {
        "pages": {
            "estimate_title": "Estimate a fare",
            "trip_summary": "{{distance}} km trip to {{city}}",
        }
    }
    with open(tmp_path / "pages.en.yml", "w", encoding="utf-8") as f:
        yaml.dump(en_pages, f)

    fr_common = {"common": {"app_name": "Estimateur de tarifs"}}
    with open(tmp_path / "common.fr.yml", "w", encoding="utf-8") as f:
        yaml.dump(fr_common, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def yaml_loader_with_cache(temp_translations_dir):
    """Create YAMLTranslationLoader with caching enabled."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=True)


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_en": "en",
        "specific_en_us": "en-US",
        "with_quality": "en-US,en;q=0.9,fr;q=0.8",
        "reordered": "de;q=0.5,fr-CA;q=0.9,en;q=0.7",
        "wildcard": "en-US,en;q=0.9,*;q=0.8",
        "invalid_quality": "en;q=invalid,fr",
        "refused": "en;q=0,fr",
    }
