"""Locale identifiers for catalog files.

Catalog filenames carry their locale as ``language[_region[_variant]]``
(``en``, ``en_US``, ``en_US_WIN``). This module provides the value type for
such identifiers, the parser for the string form, and a cached bridge to
Babel's ``Locale`` for locale-aware formatting.

Python 3.13+.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass
from typing import TYPE_CHECKING

from msgdef.constants import LOCALE_SEPARATOR, MAX_LOCALE_SEGMENTS

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "LocaleId",
    "coerce_locale",
    "get_babel_locale",
    "normalize_locale",
    "parse_locale",
]


@dataclass(frozen=True, slots=True)
class LocaleId:
    """Language, optional region and optional variant of a catalog.

    Equality is structural. The language is stored lowercase and the region
    uppercase, so ``LocaleId("EN", "us") == LocaleId("en", "US")``. Empty
    region or variant strings are stored as None.

    Attributes:
        language: Language code (e.g., 'en', 'ja')
        region: Region code (e.g., 'US', 'JP') or None
        variant: Variant (e.g., 'WIN') or None
    """

    language: str
    region: str | None = None
    variant: str | None = None

    def __post_init__(self) -> None:
        """Validate and normalize the segments.

        Raises:
            TypeError: If a segment is not a string
            ValueError: If language is empty or a segment contains '_'
        """
        if not isinstance(self.language, str):
            msg = f"language must be a string, got {type(self.language).__name__}"
            raise TypeError(msg)
        if not self.language:
            msg = "language must not be empty"
            raise ValueError(msg)
        for name in ("language", "region", "variant"):
            value = getattr(self, name)
            if value is None:
                continue
            if not isinstance(value, str):
                msg = f"{name} must be a string or None, got {type(value).__name__}"
                raise TypeError(msg)
            if LOCALE_SEPARATOR in value:
                msg = f"{name} must not contain '{LOCALE_SEPARATOR}': {value!r}"
                raise ValueError(msg)

        object.__setattr__(self, "language", self.language.lower())
        object.__setattr__(self, "region", self.region.upper() if self.region else None)
        object.__setattr__(self, "variant", self.variant or None)

    def __str__(self) -> str:
        """Return the ``language[_REGION[_variant]]`` form used in filenames."""
        if self.variant is not None:
            return LOCALE_SEPARATOR.join((self.language, self.region or "", self.variant))
        if self.region is not None:
            return f"{self.language}{LOCALE_SEPARATOR}{self.region}"
        return self.language

    @classmethod
    def parse(cls, text: str | None) -> LocaleId | None:
        """Parse ``language[_region[_variant]]``. See parse_locale()."""
        return parse_locale(text)

    def fallback_chain(self) -> tuple[LocaleId, ...]:
        """Return this locale followed by its progressively less specific parents.

        Example:
            >>> [str(loc) for loc in LocaleId("en", "US", "WIN").fallback_chain()]
            ['en_US_WIN', 'en_US', 'en']
        """
        chain = [self]
        if self.variant is not None and self.region is not None:
            chain.append(LocaleId(self.language, self.region))
        if self.region is not None or self.variant is not None:
            chain.append(LocaleId(self.language))
        return tuple(chain)

    def to_babel(self) -> Locale:
        """Resolve this identifier to a Babel Locale (cached).

        Raises:
            babel.core.UnknownLocaleError: If Babel has no data for the locale
        """
        return get_babel_locale(str(self))


def parse_locale(text: str | None) -> LocaleId | None:
    """Parse a locale string of the form ``language[_region[_variant]]``.

    Args:
        text: Locale string, or None

    Returns:
        The parsed LocaleId, or None for None, empty input, an empty language
        segment, or more than three segments.

    Example:
        >>> parse_locale("en_US")
        LocaleId(language='en', region='US', variant=None)
        >>> parse_locale("a_b_c_d") is None
        True
    """
    if not text:
        return None

    segments = text.split(LOCALE_SEPARATOR)
    if len(segments) > MAX_LOCALE_SEGMENTS or not segments[0]:
        return None

    segments.extend([""] * (MAX_LOCALE_SEGMENTS - len(segments)))
    language, region, variant = segments
    return LocaleId(language, region or None, variant or None)


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale code to the underscore form used by Babel.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
    """
    return locale_code.replace("-", LOCALE_SEPARATOR)


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def coerce_locale(locale: LocaleId | str) -> LocaleId:
    """Accept a LocaleId or its string form.

    Raises:
        TypeError: If locale is neither a LocaleId nor a string
        ValueError: If the string does not parse as a locale
    """
    if isinstance(locale, LocaleId):
        return locale
    if not isinstance(locale, str):
        msg = f"locale must be a LocaleId or string, got {type(locale).__name__}"
        raise TypeError(msg)
    parsed = parse_locale(normalize_locale(locale))
    if parsed is None:
        msg = f"Invalid locale: {locale!r}"
        raise ValueError(msg)
    return parsed
