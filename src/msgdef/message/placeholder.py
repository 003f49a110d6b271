"""Placeholders: typed conversions from argument values to output units.

A placeholder is a total function ``T -> Output``. Any callable with that
shape can be bound to a message key; ``Placeholder`` wraps one and adds
``compose()`` for adapting it to a different input type.

The factories at the bottom of this module cover common argument types and
use Babel for locale-aware number and date formatting.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from msgdef.locale_utils import LocaleId, get_babel_locale
from msgdef.message.output import Output, OutputLike, Text, as_output

if TYPE_CHECKING:
    from datetime import date as date_type
    from decimal import Decimal

    from babel import Locale

__all__ = [
    "Placeholder",
    "date",
    "decimal",
    "message",
    "number",
    "percent",
    "text",
]


@dataclass(frozen=True, slots=True)
class Placeholder[T]:
    """Conversion of a ``T`` argument into an Output value.

    Attributes:
        convert: Function producing an Output (or OutputLike) from a T

    Example:
        >>> name = Placeholder(lambda s: Text(s.upper()))
        >>> name("bob")
        Text(content='BOB')
        >>> length = name.compose(lambda items: str(len(items)))
        >>> length([1, 2, 3])
        Text(content='3')
    """

    convert: Callable[[T], OutputLike]

    def __post_init__(self) -> None:
        """Reject non-callable converters.

        Raises:
            TypeError: If convert is not callable
        """
        if not callable(self.convert):
            msg = "convert must be callable"
            raise TypeError(msg)

    def __call__(self, value: T) -> Output:
        """Convert value. Errors raised by the converter propagate unchanged."""
        return as_output(self.convert(value))

    def compose[V](self, before: Callable[[V], T]) -> Placeholder[V]:
        """Return a placeholder that applies ``before`` and then this conversion.

        Args:
            before: Function mapping the new input type onto this placeholder's input

        Raises:
            TypeError: If before is not callable
        """
        if not callable(before):
            msg = "before must be callable"
            raise TypeError(msg)
        convert = self.convert
        return Placeholder(lambda value: convert(before(value)))


def _resolve_locale(locale: LocaleId | str) -> Locale:
    if isinstance(locale, LocaleId):
        return locale.to_babel()
    return get_babel_locale(locale)


def text() -> Placeholder[object]:
    """Placeholder rendering ``str(value)``."""
    return Placeholder(lambda value: Text(str(value)))


def message() -> Placeholder[OutputLike]:
    """Placeholder for arguments that are already outputs (e.g. a MessageKey)."""
    return Placeholder(as_output)


def number(locale: LocaleId | str) -> Placeholder[int | float | Decimal]:
    """Placeholder formatting numbers with the locale's grouping and decimal symbols.

    Example:
        >>> number("de_DE")(1234.5)
        Text(content='1.234,5')
    """
    from babel.numbers import format_decimal  # noqa: PLC0415

    babel_locale = _resolve_locale(locale)
    return Placeholder(lambda value: Text(format_decimal(value, locale=babel_locale)))


def decimal(locale: LocaleId | str, format: str | None = None) -> Placeholder[int | float | Decimal]:  # noqa: A002
    """Placeholder formatting numbers with an explicit CLDR number pattern.

    Args:
        locale: Locale whose symbols are used
        format: CLDR pattern such as ``"#,##0.00"``; None uses the locale default
    """
    from babel.numbers import format_decimal  # noqa: PLC0415

    babel_locale = _resolve_locale(locale)
    return Placeholder(
        lambda value: Text(format_decimal(value, format=format, locale=babel_locale))
    )


def percent(locale: LocaleId | str) -> Placeholder[int | float | Decimal]:
    """Placeholder formatting ratios as percentages (``0.25`` -> ``25%``)."""
    from babel.numbers import format_percent  # noqa: PLC0415

    babel_locale = _resolve_locale(locale)
    return Placeholder(lambda value: Text(format_percent(value, locale=babel_locale)))


def date(locale: LocaleId | str, format: str = "medium") -> Placeholder[date_type]:  # noqa: A002
    """Placeholder formatting dates.

    Args:
        locale: Locale used for month names and ordering
        format: ``"short"``, ``"medium"``, ``"long"``, ``"full"`` or a CLDR pattern
    """
    from babel.dates import format_date  # noqa: PLC0415

    babel_locale = _resolve_locale(locale)
    return Placeholder(lambda value: Text(format_date(value, format=format, locale=babel_locale)))
