"""Route paths and locale-segment canonicalization.

A route path is ``pathname + search + hash`` as reported by the navigation
layer. The pathname is kept as its non-empty segments; search and hash are
carried verbatim and never reinterpreted.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from infrastructure.i18n.models import DEFAULT_LOCALE, Locale

LOCALE_SEGMENT_LENGTH = 2


class LocaleSegment(str, Enum):
    """Classification of the first path segment."""

    VALID = "valid"
    INVALID_TWO_LETTER = "invalid_two_letter"
    ABSENT = "absent"


@dataclass(frozen=True)
class RoutePath:
    """A location split into segments, search and hash.

    Attributes:
        segments: Pathname split on "/" with empty segments removed.
        search: Query string including its leading "?", or "".
        hash: Fragment including its leading "#", or "".
    """

    segments: tuple[str, ...] = ()
    search: str = ""
    hash: str = ""

    @classmethod
    def parse(cls, raw: str) -> "RoutePath":
        """Split a raw location string.

        The hash starts at the first "#", the search at the first "?"
        before it. Repeated or trailing slashes collapse.
        """
        rest, sep, fragment = (raw or "").partition("#")
        hash_part = sep + fragment
        pathname, sep, query = rest.partition("?")
        search = sep + query
        segments = tuple(segment for segment in pathname.split("/") if segment)
        return cls(segments=segments, search=search, hash=hash_part)

    @classmethod
    def from_parts(cls, pathname: str, query: str = "", fragment: str = "") -> "RoutePath":
        """Build from URL components given without their "?"/"#" markers."""
        return cls(
            segments=tuple(segment for segment in pathname.split("/") if segment),
            search=f"?{query}" if query else "",
            hash=f"#{fragment}" if fragment else "",
        )

    @classmethod
    def coerce(cls, path: Union["RoutePath", str]) -> "RoutePath":
        return path if isinstance(path, RoutePath) else cls.parse(path)

    @property
    def pathname(self) -> str:
        return "/" + "/".join(self.segments)

    @property
    def first_segment(self) -> Optional[str]:
        return self.segments[0] if self.segments else None

    def with_segments(self, segments: tuple[str, ...]) -> "RoutePath":
        return replace(self, segments=tuple(segments))

    def __str__(self) -> str:
        return self.pathname + self.search + self.hash


def classify_segment(segment: Optional[str]) -> LocaleSegment:
    """Classify a first path segment.

    Any two-character segment that is not a supported locale code is
    treated as a mistyped or unsupported locale (``InvalidTwoLetter``),
    including two-letter content slugs.
    """
    if segment is None:
        return LocaleSegment.ABSENT
    if Locale.is_supported(segment):
        return LocaleSegment.VALID
    if len(segment) == LOCALE_SEGMENT_LENGTH:
        return LocaleSegment.INVALID_TWO_LETTER
    return LocaleSegment.ABSENT


def locale_of(path: Union[RoutePath, str]) -> Optional[Locale]:
    """Return the locale carried by the path's first segment, if valid."""
    segment = RoutePath.coerce(path).first_segment
    if classify_segment(segment) is LocaleSegment.VALID:
        return Locale(segment)
    return None


def canonicalize(path: Union[RoutePath, str], locale: Locale) -> RoutePath:
    """Rewrite ``path`` so that its first segment is ``locale``.

    Total and deterministic: a valid first segment is replaced (or kept
    when it already equals ``locale``), an invalid two-letter segment is
    dropped before prepending, and any other path is prefixed. Search and
    hash are carried over untouched.

    Args:
        path: The path to canonicalize, parsed or raw.
        locale: The locale the result must carry.

    Returns:
        The canonical RoutePath.
    """
    path = RoutePath.coerce(path)
    segments = path.segments
    kind = classify_segment(path.first_segment)

    if kind is LocaleSegment.VALID:
        if segments[0] == locale.value:
            return path
        return path.with_segments((locale.value,) + segments[1:])

    if kind is LocaleSegment.INVALID_TWO_LETTER:
        return path.with_segments((locale.value,) + segments[1:])

    return path.with_segments((locale.value,) + segments)


def localize_path(target: str, locale: Optional[Locale]) -> str:
    """Prefix an in-app absolute path with the current locale.

    Paths that already start with a supported locale are returned as-is,
    "/" becomes "/<locale>", and relative paths are left for the host to
    resolve. Without a current locale the default locale is used.
    """
    if not target.startswith("/"):
        return target

    parsed = RoutePath.parse(target)
    if classify_segment(parsed.first_segment) is LocaleSegment.VALID:
        return target

    prefix = (locale or DEFAULT_LOCALE).value
    return f"/{prefix}" if target == "/" else f"/{prefix}{target}"
