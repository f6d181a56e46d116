"""Fixtures for locale routing tests."""

import pytest

from infrastructure.i18n import ActiveLocaleStore, BrowserContext
from infrastructure.routing import BrowserSession, HistoryNavigator


@pytest.fixture
def store():
    return ActiveLocaleStore()


@pytest.fixture
def history():
    return HistoryNavigator()


@pytest.fixture
def make_session(localization):
    """Build a BrowserSession with the given navigator languages."""

    def _make(languages=(), context=None, initial_locale=None):
        return BrowserSession(
            localization,
            languages=languages,
            context=context,
            initial_locale=initial_locale,
        )

    return _make


@pytest.fixture
def english_browser(make_session):
    return make_session(languages=["en-US", "en"])


@pytest.fixture
def returning_visitor(make_session):
    """A browser that cached ``en`` on a previous visit."""
    return make_session(
        context=BrowserContext(cookies={"i18next": "en"}, languages=["fr-FR"])
    )
