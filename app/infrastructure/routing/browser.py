"""In-memory single-page client host.

Wires one history, one active locale store, the route guard and the
locale switch controller together the way a client-side router does:
every history change re-enters the guard synchronously, and page
content is only produced through ``render`` once the guard resolved.
"""

from typing import Callable, Iterable, Optional, TypeVar, Union

from infrastructure.configuration import LocalizationSettings
from infrastructure.i18n.models import Locale
from infrastructure.i18n.resolvers import BrowserContext
from infrastructure.i18n.state import ActiveLocaleStore
from infrastructure.routing.guard import ResolutionState, RouteGuard
from infrastructure.routing.navigation import (
    AppNavigator,
    HistoryNavigator,
    NavigationAction,
)
from infrastructure.routing.paths import RoutePath
from infrastructure.routing.switcher import LocaleSwitchController

T = TypeVar("T")


class BrowserSession:
    """A browser tab running the fare estimator client.

    Attributes:
        context: Cookies, local storage, navigator languages, document lang.
        history: The tab's history stack.
        store: Active locale for this tab.
        guard: Route guard mounted at the root of the page tree.
        switcher: Controller behind the language switcher.
        app_navigator: Locale-aware navigation helper handed to pages.
    """

    def __init__(
        self,
        localization: LocalizationSettings,
        languages: Iterable[str] = (),
        context: Optional[BrowserContext] = None,
        initial_locale: Optional[Locale] = None,
    ):
        self.localization = localization
        self.context = context or BrowserContext(languages=list(languages))
        self.history: Optional[HistoryNavigator] = None
        self.store = ActiveLocaleStore(initial=initial_locale)
        self.store.subscribe(self._cache_locale)
        if initial_locale is not None:
            self.context.document_lang = initial_locale.value
        self.guard: Optional[RouteGuard] = None
        self.switcher: Optional[LocaleSwitchController] = None
        self.app_navigator: Optional[AppNavigator] = None

    def open(self, url: Union[RoutePath, str]) -> ResolutionState:
        """Load ``url`` in the tab and mount the guard on it."""
        self.history = HistoryNavigator(initial=url)
        self.guard = RouteGuard(
            store=self.store,
            navigator=self.history,
            hints_provider=self._hints,
        )
        self.switcher = LocaleSwitchController(self.store, self.history)
        self.app_navigator = AppNavigator(self.history, self.store.get_active_locale)
        self.history.listen(self.guard.on_navigation)
        self.guard.on_navigation(self.history.location, NavigationAction.INITIAL)
        return self.guard.state

    @property
    def location(self) -> RoutePath:
        return self._require_history().location

    @property
    def state(self) -> ResolutionState:
        return self.guard.state if self.guard else ResolutionState.UNRESOLVED

    def navigate(self, target: Union[int, str], replace: bool = False) -> ResolutionState:
        """Follow an in-app link (locale-aware)."""
        self._require_history()
        self.app_navigator.navigate(target, replace=replace)
        return self.state

    def switch_locale(self, target: Union[Locale, str]) -> Optional[RoutePath]:
        """The user picked ``target`` in the language switcher."""
        self._require_history()
        return self.switcher.switch_locale(target)

    def render(self, page: Callable[[Locale], T]) -> Optional[T]:
        """Render ``page(locale)`` beneath the guard."""
        if self.guard is None:
            return None
        return self.guard.render(page)

    def _hints(self, path: RoutePath):
        return self.context.hints_for(path.first_segment, path.search, self.localization)

    def _cache_locale(self, locale: Locale, _previous: Optional[Locale]) -> None:
        self.context.cache_locale(locale, self.localization)

    def _require_history(self) -> HistoryNavigator:
        if self.history is None:
            raise RuntimeError("BrowserSession.open() must be called first")
        return self.history
