"""Locale route wrapper for the HTTP server.

Every page request passes through a request-scoped RouteGuard. A path
without a valid locale segment is answered with the guard's corrective
redirect and never reaches a page; a valid one sets
``request.state.locale`` for the page to consume.
"""

from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from infrastructure.configuration import LocalizationSettings
from infrastructure.i18n import ActiveLocaleStore, Locale, hints_from_request
from infrastructure.logging import bind_request_context, get_module_logger
from infrastructure.routing import (
    RedirectNavigator,
    ResolutionState,
    RouteGuard,
    request_route_path,
)
from infrastructure.services.providers import get_settings

logger = get_module_logger()


class LocaleRouteMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, localization: Optional[LocalizationSettings] = None):
        super().__init__(app)
        self.localization = localization or get_settings().localization

    def is_exempt(self, path: str) -> bool:
        """True for non-page routes that are not mounted beneath the wrapper."""
        for prefix in self.localization.EXEMPT_PATH_PREFIXES:
            if prefix == "/" or path == prefix or path.startswith(prefix + "/"):
                return True
        return False

    async def dispatch(self, request: Request, call_next):
        if self.is_exempt(request.url.path):
            return await call_next(request)

        path = request_route_path(request)
        store = ActiveLocaleStore()
        navigator = RedirectNavigator(path)
        guard = RouteGuard(
            store=store,
            navigator=navigator,
            hints_provider=lambda _path: hints_from_request(request, self.localization),
        )

        with bind_request_context(
            correlation_id=request.headers.get("X-Correlation-ID"),
            request_path=request.url.path,
            request_method=request.method,
        ):
            state = guard.evaluate(path)

            if state is ResolutionState.RESOLVED:
                locale = store.get_active_locale()
                request.state.locale = locale
                response = await call_next(request)
                self._cache_locale(request, response, locale)
                response.headers["Content-Language"] = locale.value
                return response

            if navigator.response is None:
                logger.error("locale_resolution_stalled", state=state.value)
                return Response(status_code=503)

            return navigator.response

    def _cache_locale(self, request: Request, response: Response, locale: Locale) -> None:
        if request.cookies.get(self.localization.COOKIE_NAME) == locale.value:
            return
        response.set_cookie(
            self.localization.COOKIE_NAME,
            locale.value,
            max_age=self.localization.COOKIE_MAX_AGE_SECONDS,
            samesite="lax",
        )
