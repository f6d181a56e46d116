"""Locale negotiation from client hints.

Provides the pure negotiation step (ranked hints -> one supported locale)
and the collectors that gather those hints from an HTTP request or from
an in-memory browser context.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional
from urllib.parse import parse_qs, quote

import structlog
from starlette.requests import Request

from infrastructure.configuration import LocalizationSettings
from infrastructure.i18n.models import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    Locale,
    LocaleHints,
)

logger = structlog.get_logger().bind(component="i18n.resolver")


def normalize_language_tag(tag: Optional[str]) -> Optional[str]:
    """Reduce a free-form language tag to its lower-cased primary subtag.

    ``"en-US"`` -> ``"en"``, ``"FR_ca"`` -> ``"fr"``. Empty or malformed
    tags (no alphabetic primary subtag) yield None.
    """
    if not tag or not isinstance(tag, str):
        return None
    primary = tag.strip().replace("_", "-").split("-", 1)[0].lower()
    if not primary or not primary.isalpha():
        return None
    return primary


def parse_accept_language(accept_language: Optional[str]) -> list[str]:
    """Parse an Accept-Language header into tags, most preferred first.

    "en-US,en;q=0.9,fr-FR;q=0.8" -> ["en-US", "en", "fr-FR"]. Entries with
    an unparseable quality keep the default weight of 1.0; ``q=0`` means
    "not acceptable" and is dropped. Ties keep header order.
    """
    if not accept_language:
        return []

    preferences = []
    for part in accept_language.split(","):
        lang_range = part.split(";")[0].strip()
        if not lang_range or lang_range == "*":
            continue
        quality = 1.0

        if ";" in part and "q=" in part:
            try:
                quality = float(part.split("q=")[1])
            except ValueError:
                quality = 1.0

        if quality <= 0:
            continue
        preferences.append((lang_range, quality))

    return [
        lang_range
        for lang_range, _ in sorted(preferences, key=lambda x: x[1], reverse=True)
    ]


class LocaleNegotiator:
    """Selects one supported locale from ranked, possibly invalid hints.

    The first hint whose primary subtag is a supported locale wins;
    anything else (missing, empty, malformed, unsupported) is skipped.
    When nothing qualifies the default locale is returned. Negotiation
    never fails and has no side effects.
    """

    def __init__(
        self,
        supported_locales: Iterable[Locale] = SUPPORTED_LOCALES,
        default_locale: Locale = DEFAULT_LOCALE,
    ):
        self.supported_locales = tuple(supported_locales)
        self.default_locale = default_locale
        self._by_code = {locale.value: locale for locale in self.supported_locales}

    def negotiate(self, hints: Iterable[Optional[str]]) -> Locale:
        """Return the first supported locale among ``hints``, else the default.

        Args:
            hints: Language tags in priority order. A LocaleHints instance
                can be passed directly.

        Returns:
            The negotiated Locale.
        """
        for hint in hints:
            code = normalize_language_tag(hint)
            if code is None:
                continue
            locale = self._by_code.get(code)
            if locale is not None:
                return locale
        return self.default_locale


_default_negotiator = LocaleNegotiator()


def negotiate(hints: Iterable[Optional[str]]) -> Locale:
    """Negotiate with the fixed supported set and default (``fr``)."""
    return _default_negotiator.negotiate(hints)


def _first_query_value(search: str, parameter: str) -> Optional[str]:
    values = parse_qs(search.lstrip("?")).get(parameter)
    return values[0] if values else None


def raw_request_path(request: Request) -> str:
    """Pathname of the request as the client sent it, still percent-encoded.

    Starlette decodes ``request.url.path``, which would turn an encoded
    ``%23``, ``%3F`` or ``%2F`` into a real delimiter. The ASGI ``raw_path``
    keeps the original bytes; servers that omit it get each decoded segment
    quoted again.
    """
    raw_path = request.scope.get("raw_path")
    if raw_path:
        return raw_path.decode("latin-1")
    return "/".join(quote(segment, safe="") for segment in request.scope["path"].split("/"))


def hints_from_request(
    request: Request,
    localization: LocalizationSettings,
) -> LocaleHints:
    """Collect locale hints from an HTTP request.

    The stored preference is whatever the client forwards in the storage
    header; a server never sees the document ``lang`` attribute.
    """
    segments = [segment for segment in raw_request_path(request).split("/") if segment]
    hints = LocaleHints(
        query=request.query_params.get(localization.QUERY_PARAMETER),
        path=segments[0] if segments else None,
        cookie=request.cookies.get(localization.COOKIE_NAME),
        stored=request.headers.get(localization.STORAGE_HEADER),
        navigator=tuple(parse_accept_language(request.headers.get("accept-language"))),
    )
    logger.debug("collected_request_hints", hints=hints.ordered())
    return hints


@dataclass
class BrowserContext:
    """Client-side hint sources of an in-memory browser.

    Mirrors what a single-page client can read: cookies, local storage,
    the navigator language list and the document ``lang`` attribute.
    """

    cookies: dict[str, str] = field(default_factory=dict)
    local_storage: dict[str, str] = field(default_factory=dict)
    languages: list[str] = field(default_factory=list)
    document_lang: Optional[str] = None

    def hints_for(
        self,
        first_segment: Optional[str],
        search: str,
        localization: LocalizationSettings,
    ) -> LocaleHints:
        """Collect hints for a location given its first segment and query."""
        return LocaleHints(
            query=_first_query_value(search, localization.QUERY_PARAMETER),
            path=first_segment,
            cookie=self.cookies.get(localization.COOKIE_NAME),
            stored=self.local_storage.get(localization.STORAGE_KEY),
            navigator=tuple(self.languages),
            document=self.document_lang,
        )

    def cache_locale(self, locale: Locale, localization: LocalizationSettings) -> None:
        """Persist the active locale the way the client caches it."""
        self.local_storage[localization.STORAGE_KEY] = locale.value
        self.cookies[localization.COOKIE_NAME] = locale.value
        self.document_lang = locale.value
