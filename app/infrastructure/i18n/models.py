"""Translation and locale models for the i18n system.

Defines the fixed set of supported locales, the hint sources consulted
during locale negotiation, and the translation catalog structures.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Sequence


class Locale(str, Enum):
    """Supported locale identifiers.

    Two-letter primary language subtags. Declaration order is the
    supported order; French is the system default.
    """

    FR = "fr"
    EN = "en"

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Convert string to Locale enum.

        Args:
            locale_str: Two-letter locale code (e.g., "fr", "en").

        Returns:
            Matching Locale enum value.

        Raises:
            ValueError: If locale string is not supported.
        """
        try:
            return cls(locale_str)
        except ValueError as e:
            raise ValueError(f"Unsupported locale: {locale_str}") from e

    @classmethod
    def is_supported(cls, code: Optional[str]) -> bool:
        """Return True if ``code`` is exactly a supported locale code."""
        return code in {locale.value for locale in cls}

    def __str__(self) -> str:
        return self.value


DEFAULT_LOCALE = Locale.FR
SUPPORTED_LOCALES: tuple[Locale, ...] = tuple(Locale)


@dataclass(frozen=True)
class LanguageOption:
    """Display metadata for one entry of the language switcher."""

    locale: Locale
    label: str
    name: str

    @property
    def code(self) -> str:
        return self.locale.value


SUPPORTED_LANGUAGES: tuple[LanguageOption, ...] = (
    LanguageOption(locale=Locale.FR, label="FR", name="Français"),
    LanguageOption(locale=Locale.EN, label="EN", name="English"),
)


@dataclass(frozen=True)
class LocaleHints:
    """Raw locale hints gathered from the client, in negotiation priority.

    Every source is optional and free-form (``en-US``, ``fr_CA``, ``xx``...);
    normalization and validation belong to the negotiator.

    Attributes:
        query: Explicit query string parameter (``?lng=en``).
        path: First segment of the requested path.
        cookie: Locale cookie previously cached by the client.
        stored: Preference kept in the client's local storage.
        navigator: Browser-reported language list, most preferred first.
        document: The document-level ``lang`` attribute.
    """

    query: Optional[str] = None
    path: Optional[str] = None
    cookie: Optional[str] = None
    stored: Optional[str] = None
    navigator: Sequence[str] = field(default_factory=tuple)
    document: Optional[str] = None

    def ordered(self) -> list[Optional[str]]:
        """Flatten the sources into the fixed priority order."""
        return [
            self.query,
            self.path,
            self.cookie,
            self.stored,
            *self.navigator,
            self.document,
        ]

    def __iter__(self) -> Iterator[Optional[str]]:
        return iter(self.ordered())


@dataclass(frozen=True)
class TranslationKey:
    """Represents a translation key for accessing translated messages.

    Keys are hierarchical (e.g., "pages.estimate_title", "nav.pricing").

    Attributes:
        namespace: Top-level namespace (e.g., "common", "pages").
        message_key: Specific message identifier (e.g., "app_name").
    """

    namespace: str
    message_key: str

    def __str__(self) -> str:
        return f"{self.namespace}.{self.message_key}"

    @classmethod
    def from_string(cls, key_string: str) -> "TranslationKey":
        """Create TranslationKey from dot-separated string.

        Raises:
            ValueError: If key_string does not contain a dot.
        """
        parts = key_string.split(".", 1)
        if len(parts) != 2:
            raise ValueError(
                f"Translation key must be in format 'namespace.key': {key_string}"
            )
        return cls(namespace=parts[0], message_key=parts[1])


@dataclass
class TranslationCatalog:
    """Container for translations in a specific locale.

    Attributes:
        locale: The Locale this catalog is for.
        messages: Nested dict structure {namespace: {key: message_string}}.
    """

    locale: Locale
    messages: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def get_message(self, key: TranslationKey) -> Optional[str]:
        """Retrieve a translation message by key, or None if not found."""
        return self.messages.get(key.namespace, {}).get(key.message_key)

    def has_message(self, key: TranslationKey) -> bool:
        return key.message_key in self.messages.get(key.namespace, {})

    def merge(self, namespace: str, messages: Dict[str, Any]) -> None:
        """Merge messages into a namespace; later entries override earlier ones."""
        self.messages.setdefault(namespace, {}).update(messages)
