"""Tests for the localized page routes, served through the full app."""

import pytest

from api.routes.pages import PAGES


class TestPages:
    """Pages render in the resolved locale."""

    @pytest.mark.parametrize("slug", [slug for slug in PAGES if slug])
    def test_every_page_renders(self, client, slug):
        response = client.get(f"/en/{slug}")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert '<html lang="en">' in response.text

    def test_home_in_french(self, client):
        response = client.get("/fr")

        assert response.status_code == 200
        assert '<html lang="fr">' in response.text
        assert "Estimateur de tarifs" in response.text
        assert response.headers["content-language"] == "fr"

    def test_home_with_trailing_slash(self, client):
        response = client.get("/en/")
        assert response.status_code == 200
        assert "<h1>Home</h1>" in response.text

    def test_nav_links_are_localized(self, client):
        response = client.get("/en/pricing")

        assert 'href="/en/estimate"' in response.text
        assert 'href="/en"' in response.text
        assert 'href="/fr/' not in response.text

    def test_switcher_links_keep_query(self, client):
        response = client.get("/fr/trajets?page=2")

        assert 'href="/locale/en?from=/fr/trajets%3Fpage%3D2"' in response.text
        assert 'aria-current="true">FR</a>' in response.text

    def test_switcher_links_keep_encoded_query(self, client):
        response = client.get("/fr/trajets?q=a%26b")
        assert 'href="/locale/en?from=/fr/trajets%3Fq%3Da%2526b"' in response.text

    def test_unknown_page_redirects_to_locale_home(self, client):
        response = client.get("/en/does-not-exist")

        assert response.status_code == 307
        assert response.headers["location"] == "/en"


class TestRoutingThroughApp:
    """The wrapper sits in front of every page."""

    def test_bare_root_redirects(self, client):
        response = client.get("/", headers={"Accept-Language": "en-GB"})

        assert response.status_code == 307
        assert response.headers["location"] == "/en"

    def test_invalid_prefix_redirects(self, client):
        response = client.get("/xx/estimate?x=1", headers={"Accept-Language": "de"})
        assert response.headers["location"] == "/fr/estimate?x=1"

    def test_resolving_sets_cookie(self, client):
        response = client.get("/en/stats")
        assert "i18next=en" in response.headers["set-cookie"]
