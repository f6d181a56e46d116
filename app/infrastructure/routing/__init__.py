"""Locale-aware routing.

Keeps every navigable URL prefixed with a supported locale and keeps that
prefix in sync with the active locale.

Main components:
- paths: RoutePath, classify_segment, canonicalize, localize_path
- navigation: Navigator interface, HistoryNavigator, AppNavigator
- guard: RouteGuard and ResolutionState
- switcher: LocaleSwitchController
- browser: BrowserSession, the in-memory client host
- redirects: RedirectNavigator (the HTTP host) and request_route_path
"""

from infrastructure.routing.browser import BrowserSession
from infrastructure.routing.guard import ResolutionState, RouteGuard
from infrastructure.routing.redirects import RedirectNavigator, request_route_path
from infrastructure.routing.navigation import (
    AppNavigator,
    HistoryNavigator,
    NavigationAction,
    NavigationUnavailableError,
    Navigator,
)
from infrastructure.routing.paths import (
    LocaleSegment,
    RoutePath,
    canonicalize,
    classify_segment,
    locale_of,
    localize_path,
)
from infrastructure.routing.switcher import LocaleSwitchController

__all__ = [
    "AppNavigator",
    "BrowserSession",
    "HistoryNavigator",
    "LocaleSegment",
    "LocaleSwitchController",
    "NavigationAction",
    "NavigationUnavailableError",
    "Navigator",
    "RedirectNavigator",
    "ResolutionState",
    "RoutePath",
    "RouteGuard",
    "canonicalize",
    "classify_segment",
    "locale_of",
    "localize_path",
    "request_route_path",
]
