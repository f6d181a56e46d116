"""Language switcher endpoint.

``GET /locale/{target}?from=/fr/trajets?page=2`` answers with a 303 to the
same page in ``target``. It sits outside the locale route wrapper: the
switch is an explicit user action, not a correction.
"""

from typing import Optional
from urllib.parse import urlsplit

from fastapi import APIRouter, HTTPException, Query, Request

from infrastructure.i18n import ActiveLocaleStore, Locale
from infrastructure.logging import get_module_logger
from infrastructure.routing import (
    LocaleSwitchController,
    RedirectNavigator,
    RoutePath,
    locale_of,
)
from infrastructure.services import SettingsDep

logger = get_module_logger()
router = APIRouter(prefix="/locale", tags=["Locale"])


def _safe_local_path(candidate: Optional[str]) -> Optional[str]:
    """Keep only same-origin absolute paths."""
    if not candidate or not candidate.startswith("/") or candidate.startswith("//"):
        return None
    return candidate


def current_location(request: Request, from_path: Optional[str]) -> RoutePath:
    """Location the switcher was used on: ``from``, then the Referer, then "/"."""
    local = _safe_local_path(from_path)
    if local is None:
        referer = request.headers.get("referer")
        if referer:
            parts = urlsplit(referer)
            if not parts.netloc or parts.netloc == request.url.netloc:
                local = _safe_local_path(
                    parts.path + (f"?{parts.query}" if parts.query else "")
                    + (f"#{parts.fragment}" if parts.fragment else "")
                )
    return RoutePath.parse(local or "/")


@router.get("/{target}")
def switch_locale(
    request: Request,
    target: str,
    settings: SettingsDep,
    from_path: Optional[str] = Query(default=None, alias="from"),
):
    """Switch the active locale to ``target`` and go back to the same page."""
    localization = settings.localization
    try:
        locale = Locale.from_string(target)
    except ValueError as e:
        logger.warning("locale_switch_rejected", target=target)
        raise HTTPException(status_code=404, detail=str(e)) from e

    current = current_location(request, from_path)
    active = locale_of(current)
    if active is None:
        cookie = request.cookies.get(localization.COOKIE_NAME)
        active = Locale(cookie) if Locale.is_supported(cookie) else None

    navigator = RedirectNavigator(current)
    switcher = LocaleSwitchController(ActiveLocaleStore(initial=active), navigator)
    if switcher.switch_locale(locale) is None:
        # Already active: the wrapper still canonicalizes a bare path.
        navigator.push(current)

    response = navigator.response
    response.set_cookie(
        localization.COOKIE_NAME,
        locale.value,
        max_age=localization.COOKIE_MAX_AGE_SECONDS,
        samesite="lax",
    )
    return response
