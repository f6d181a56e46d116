"""Localized page routes.

Every route here sits beneath the locale route wrapper: by the time a
handler runs the first path segment is a supported locale and the
resolved locale is injected. Pages never derive the locale themselves.
"""

from html import escape
from typing import Callable
from urllib.parse import quote

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from infrastructure.i18n import SUPPORTED_LANGUAGES, Locale
from infrastructure.logging import get_module_logger
from infrastructure.routing import RedirectNavigator, RoutePath, localize_path, request_route_path
from infrastructure.services import ResolvedLocaleDep, TranslationServiceDep

logger = get_module_logger()
router = APIRouter(tags=["Pages"])

HOME_PAGE = "home"

# Page slug -> translation key prefix in the "pages" namespace.
PAGES = {
    "": HOME_PAGE,
    "estimate": "estimate",
    "add-trajet": "add_trajet",
    "trajets": "trajets",
    "marketplace": "marketplace",
    "pricing": "pricing",
    "services": "services",
    "stats": "stats",
    "contact": "contact",
}

NAVIGATION = ["/", "/estimate", "/trajets", "/marketplace", "/pricing", "/services", "/stats", "/contact"]


PAGE_HTML = """<!DOCTYPE html>
<html lang="{lang}">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title} | {app_name}</title>
</head>
<body>
    <header>
        <a href="{home}">{app_name}</a>
        <nav aria-label="{nav_label}">
            <ul>{nav}</ul>
        </nav>
        <nav aria-label="{switcher_label}">
            <ul>{switcher}</ul>
        </nav>
    </header>
    <main>
        <h1>{title}</h1>
        <p>{intro}</p>
    </main>
</body>
</html>
"""


def _nav_items(t: Callable[..., str], locale: Locale) -> str:
    items = []
    for target in NAVIGATION:
        key = PAGES[target.lstrip("/")]
        items.append(
            f'<li><a href="{escape(localize_path(target, locale))}">'
            f"{escape(t(f'nav.{key}'))}</a></li>"
        )
    return "".join(items)


def _switcher_items(locale: Locale, current: RoutePath) -> str:
    items = []
    for option in SUPPORTED_LANGUAGES:
        href = f"/locale/{option.code}?from={quote(str(current), safe='/')}"
        current_attr = ' aria-current="true"' if option.locale is locale else ""
        items.append(
            f'<li><a href="{escape(href)}" lang="{option.code}" '
            f'title="{escape(option.name)}"{current_attr}>{escape(option.label)}</a></li>'
        )
    return "".join(items)


def render_page(
    request: Request,
    page: str,
    locale: Locale,
    t: Callable[..., str],
) -> HTMLResponse:
    current = request_route_path(request)
    html = PAGE_HTML.format(
        lang=locale.value,
        title=escape(t(f"pages.{page}_title")),
        intro=escape(t(f"pages.{page}_intro")),
        app_name=escape(t("common.app_name")),
        home=escape(localize_path("/", locale)),
        nav_label=escape(t("common.nav_label")),
        nav=_nav_items(t, locale),
        switcher_label=escape(t("common.switcher_label")),
        switcher=_switcher_items(locale, current),
    )
    return HTMLResponse(content=html)


@router.get("/{lang}", response_class=HTMLResponse)
def home(
    request: Request,
    lang: str,  # pylint: disable=unused-argument
    locale: ResolvedLocaleDep,
    translation: TranslationServiceDep,
):
    """Home page for the resolved locale."""
    return render_page(request, HOME_PAGE, locale, translation.for_locale(locale))


@router.get("/{lang}/{page:path}", response_class=HTMLResponse)
def localized_page(
    request: Request,
    lang: str,  # pylint: disable=unused-argument
    page: str,
    locale: ResolvedLocaleDep,
    translation: TranslationServiceDep,
):
    """Localized page; unknown pages go back to the locale's home page."""
    slug = page.strip("/")
    key = PAGES.get(slug)
    if key is None:
        logger.info("unknown_page_redirected", page=slug, locale=locale.value)
        navigator = RedirectNavigator(request_route_path(request))
        navigator.replace(localize_path("/", locale))
        return navigator.response
    return render_page(request, key, locale, translation.for_locale(locale))
