"""Redirect guard: the per-navigation gate in front of every page.

On each navigation the guard either accepts the location (its first
segment is a supported locale, which then becomes the active locale) or
corrects it with a single history replace to the canonical path for the
negotiated locale. Nothing renders unless the guard is resolved.
"""

from enum import Enum
from typing import Callable, Iterable, Optional, TypeVar, Union

from infrastructure.i18n.models import Locale
from infrastructure.i18n.resolvers import LocaleNegotiator
from infrastructure.i18n.state import ActiveLocaleStore
from infrastructure.logging import get_module_logger
from infrastructure.routing.navigation import Navigator, NavigationUnavailableError
from infrastructure.routing.paths import (
    LocaleSegment,
    RoutePath,
    canonicalize,
    classify_segment,
    locale_of,
)

logger = get_module_logger()

T = TypeVar("T")

HintsProvider = Callable[[RoutePath], Iterable[Optional[str]]]


class ResolutionState(str, Enum):
    """Lifecycle of one navigation through the guard."""

    UNRESOLVED = "unresolved"
    REDIRECTING = "redirecting"
    RESOLVED = "resolved"


class RouteGuard:
    """State machine deciding between redirecting and rendering.

    Attributes:
        store: The active locale accessor pair.
        navigator: Host used to issue the corrective replace.
        redirect_target: Canonical path of the last correction, if any.
    """

    def __init__(
        self,
        store: ActiveLocaleStore,
        navigator: Navigator,
        hints_provider: Optional[HintsProvider] = None,
        negotiator: Optional[LocaleNegotiator] = None,
    ):
        self.store = store
        self.navigator = navigator
        self.hints_provider = hints_provider
        self.negotiator = negotiator or LocaleNegotiator()
        self.redirect_target: Optional[RoutePath] = None
        self._state = ResolutionState.UNRESOLVED
        self._location: Optional[RoutePath] = None

    @property
    def state(self) -> ResolutionState:
        return self._state

    @property
    def location(self) -> Optional[RoutePath]:
        """The location the guard last evaluated."""
        return self._location

    @property
    def is_resolved(self) -> bool:
        """Resolved, and the location still carries the active locale."""
        return (
            self._state is ResolutionState.RESOLVED
            and self._location is not None
            and locale_of(self._location) is self.store.get_active_locale()
        )

    def evaluate(self, path: Union[RoutePath, str, None] = None) -> ResolutionState:
        """Run the transition rule for a navigation to ``path``.

        Defaults to the navigator's current location. Returns the state
        reached once the evaluation (and any navigation it triggered
        synchronously) has completed.
        """
        path = self.navigator.location if path is None else RoutePath.coerce(path)
        self._state = ResolutionState.UNRESOLVED
        self._location = path

        kind = classify_segment(path.first_segment)
        if kind is LocaleSegment.VALID:
            self._resolve(Locale(path.first_segment))
            return self._state

        hints = self.hints_provider(path) if self.hints_provider else ()
        fallback = self.negotiator.negotiate(hints)
        target = canonicalize(path, fallback)

        self._state = ResolutionState.REDIRECTING
        self.redirect_target = target
        logger.info(
            "locale_redirect_issued",
            source=str(path),
            target=str(target),
            segment=kind.value,
            locale=fallback.value,
        )
        try:
            self.navigator.replace(target)
        except NavigationUnavailableError as e:
            # Stays REDIRECTING: nothing renders until a later navigation lands.
            logger.error("locale_redirect_stalled", target=str(target), error=str(e))

        return self._state

    def on_navigation(self, path: RoutePath, _action: object = None) -> None:
        """Navigation listener entry point."""
        self.evaluate(path)

    def render(self, children: Callable[[Locale], T]) -> Optional[T]:
        """Render ``children(locale)`` when resolved, otherwise nothing."""
        if not self.is_resolved:
            return None
        return children(self.store.get_active_locale())

    def _resolve(self, locale: Locale) -> None:
        if self.store.get_active_locale() is not locale:
            # The URL is authoritative over the previously active locale.
            self.store.set_active_locale(locale)
        self._state = ResolutionState.RESOLVED
