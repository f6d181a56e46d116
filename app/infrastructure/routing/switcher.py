"""Locale switch controller, driven only by explicit user action."""

from typing import Optional, Union

from infrastructure.i18n.models import Locale
from infrastructure.i18n.state import ActiveLocaleStore
from infrastructure.logging import get_module_logger
from infrastructure.routing.navigation import Navigator
from infrastructure.routing.paths import RoutePath, canonicalize

logger = get_module_logger()


class LocaleSwitchController:
    """Moves the user to the same page in another locale.

    Unlike the guard's correction, a switch is a push: the previous
    language stays reachable with the back button.
    """

    def __init__(self, store: ActiveLocaleStore, navigator: Navigator):
        self.store = store
        self.navigator = navigator

    def switch_locale(
        self,
        target: Union[Locale, str],
        current_path: Union[RoutePath, str, None] = None,
    ) -> Optional[RoutePath]:
        """Switch to ``target``, keeping the rest of the path, search and hash.

        Args:
            target: The locale chosen by the user.
            current_path: Path to rewrite; defaults to the navigator location.

        Returns:
            The path navigated to, or None when ``target`` is already active.

        Raises:
            ValueError: If ``target`` is not a supported locale code.
            NavigationUnavailableError: If the host refuses the push.
        """
        if not isinstance(target, Locale):
            target = Locale.from_string(target)

        if target is self.store.get_active_locale():
            logger.debug("locale_switch_skipped", locale=target.value)
            return None

        current = (
            self.navigator.location
            if current_path is None
            else RoutePath.coerce(current_path)
        )
        destination = canonicalize(current, target)
        previous = self.store.get_active_locale()
        self.store.set_active_locale(target)
        logger.info(
            "locale_switched",
            locale=target.value,
            previous=previous.value if previous else None,
            source=str(current),
            target=str(destination),
        )
        self.navigator.push(destination)
        return destination
