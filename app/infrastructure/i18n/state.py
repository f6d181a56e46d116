"""Active locale state owned by the translation subsystem.

The active locale is the single authoritative "current language". It is
exposed through an explicit accessor pair instead of a module global so
that each host (a browser session, an HTTP request) owns its own value
and passes it down to consumers.
"""

from typing import Callable, Optional

from infrastructure.i18n.models import Locale
from infrastructure.logging import get_module_logger

logger = get_module_logger()

LocaleListener = Callable[[Locale, Optional[Locale]], None]


class ActiveLocaleStore:
    """Holds the active locale and notifies listeners when it changes.

    Only the route guard (first resolution) and the locale switch
    controller write to it; everything else reads.

    Attributes:
        document_lang: Mirror of the active locale for the document
            ``lang`` attribute; None until a locale has been set.
    """

    def __init__(self, initial: Optional[Locale] = None):
        self._locale: Optional[Locale] = initial
        self._listeners: list[LocaleListener] = []
        self.document_lang: Optional[str] = initial.value if initial else None

    def get_active_locale(self) -> Optional[Locale]:
        """Return the active locale, or None while still unset."""
        return self._locale

    def set_active_locale(self, locale: Locale) -> None:
        """Make ``locale`` active; listeners only hear about real changes.

        Args:
            locale: The new active locale.
        """
        previous = self._locale
        if previous is locale:
            return
        self._locale = locale
        self.document_lang = locale.value
        logger.info(
            "active_locale_changed",
            locale=locale.value,
            previous=previous.value if previous else None,
        )
        for listener in list(self._listeners):
            listener(locale, previous)

    def subscribe(self, listener: LocaleListener) -> Callable[[], None]:
        """Register ``listener(new, previous)``; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
