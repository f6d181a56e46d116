"""Shared fixtures for the whole test suite."""

import pytest
from fastapi.testclient import TestClient

from infrastructure.configuration import LocalizationSettings


@pytest.fixture
def localization():
    """Localization settings with their defaults."""
    return LocalizationSettings()


@pytest.fixture
def app():
    """The FastAPI application with its full middleware stack."""
    from server import server

    return server.handler


@pytest.fixture
def client(app):
    """A fresh TestClient per test so cookies never leak between tests.

    Redirects are not followed: the status code and Location are what the
    locale routing tests assert on.
    """
    return TestClient(app, follow_redirects=False)
