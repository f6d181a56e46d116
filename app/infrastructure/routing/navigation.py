"""Navigation hosts: the only way the resolver reads or changes location.

A host reports the current RoutePath and accepts two kinds of requests:
``replace`` (a correction that must not leave a back-button entry) and
``push`` (a deliberate navigation that does).
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Optional, Union

from infrastructure.logging import get_module_logger
from infrastructure.i18n.models import Locale
from infrastructure.routing.paths import RoutePath, localize_path

logger = get_module_logger()


class NavigationAction(str, Enum):
    """How the current location was reached."""

    INITIAL = "initial"
    PUSH = "push"
    REPLACE = "replace"
    POP = "pop"


class NavigationUnavailableError(RuntimeError):
    """Raised when the host cannot honor a navigation request."""


NavigationListener = Callable[[RoutePath, NavigationAction], None]


class Navigator(ABC):
    """Interface to the host navigation mechanism."""

    @property
    @abstractmethod
    def location(self) -> RoutePath:
        """The current RoutePath."""

    @abstractmethod
    def push(self, path: Union[RoutePath, str]) -> None:
        """Navigate to ``path``, adding a history entry.

        Raises:
            NavigationUnavailableError: If the host cannot navigate.
        """

    @abstractmethod
    def replace(self, path: Union[RoutePath, str]) -> None:
        """Navigate to ``path``, overwriting the current history entry.

        Raises:
            NavigationUnavailableError: If the host cannot navigate.
        """

    def go(self, delta: int) -> None:
        """Move ``delta`` entries through history.

        Raises:
            NavigationUnavailableError: If the host has no history.
        """
        raise NavigationUnavailableError(
            f"{type(self).__name__} does not support history traversal"
        )


class HistoryNavigator(Navigator):
    """In-memory browser history.

    Every navigation synchronously notifies listeners with the new
    location, the same way a client router re-renders on a location change.
    Set ``available`` to False to simulate a host that ignores requests.

    Attributes:
        entries: History entries, oldest first.
        index: Position of the current entry.
    """

    def __init__(self, initial: Union[RoutePath, str] = "/"):
        self.entries: list[RoutePath] = [RoutePath.coerce(initial)]
        self.index = 0
        self.available = True
        self._listeners: list[NavigationListener] = []

    @property
    def location(self) -> RoutePath:
        return self.entries[self.index]

    def listen(self, listener: NavigationListener) -> Callable[[], None]:
        """Register ``listener(path, action)``; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unlisten() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unlisten

    def push(self, path: Union[RoutePath, str]) -> None:
        self._ensure_available("push")
        target = RoutePath.coerce(path)
        del self.entries[self.index + 1 :]
        self.entries.append(target)
        self.index += 1
        self._notify(NavigationAction.PUSH)

    def replace(self, path: Union[RoutePath, str]) -> None:
        self._ensure_available("replace")
        self.entries[self.index] = RoutePath.coerce(path)
        self._notify(NavigationAction.REPLACE)

    def go(self, delta: int) -> None:
        self._ensure_available("go")
        target = max(0, min(len(self.entries) - 1, self.index + delta))
        if target == self.index:
            return
        self.index = target
        self._notify(NavigationAction.POP)

    def _ensure_available(self, operation: str) -> None:
        if not self.available:
            logger.warning("navigation_unavailable", operation=operation)
            raise NavigationUnavailableError(f"History {operation} is unavailable")

    def _notify(self, action: NavigationAction) -> None:
        location = self.location
        for listener in list(self._listeners):
            listener(location, action)


class AppNavigator:
    """Locale-aware navigation helper for page code.

    Integer targets are history deltas; absolute paths get the active
    locale prefixed unless they already carry one; relative paths are
    appended to the current location.
    """

    def __init__(
        self,
        navigator: Navigator,
        current_locale: Callable[[], Optional[Locale]],
    ):
        self._navigator = navigator
        self._current_locale = current_locale

    def navigate(self, target: Union[int, str], replace: bool = False) -> None:
        if isinstance(target, int):
            self._navigator.go(target)
            return

        if target.startswith("/"):
            destination = RoutePath.parse(localize_path(target, self._current_locale()))
        else:
            relative = RoutePath.parse(target)
            destination = RoutePath(
                segments=self._navigator.location.segments + relative.segments,
                search=relative.search,
                hash=relative.hash,
            )

        if replace:
            self._navigator.replace(destination)
        else:
            self._navigator.push(destination)
