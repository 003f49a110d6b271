"""Naming conventions between catalog filenames and locales.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from msgdef.locale_utils import LocaleId, parse_locale

__all__ = ["FileExtension", "NamingConvention"]


class NamingConvention(Protocol):
    """Bidirectional mapping between a LocaleId and a catalog filename."""

    def to_filename(self, locale: LocaleId) -> str:
        """Return the filename holding the catalog for locale."""
        ...

    def parse(self, filename: str) -> LocaleId | None:
        """Return the locale a filename belongs to, or None if it is not a catalog."""
        ...


@dataclass(frozen=True, slots=True)
class FileExtension:
    """``<locale><extension>`` filenames, e.g. ``en_US.properties``.

    Attributes:
        extension: Suffix including the dot (e.g., '.properties')
    """

    extension: str

    def __post_init__(self) -> None:
        """Validate the extension.

        Raises:
            TypeError: If extension is not a string
            ValueError: If extension is empty
        """
        if not isinstance(self.extension, str):
            msg = f"extension must be a string, got {type(self.extension).__name__}"
            raise TypeError(msg)
        if not self.extension:
            msg = "extension must not be empty"
            raise ValueError(msg)

    def to_filename(self, locale: LocaleId) -> str:
        return f"{locale}{self.extension}"

    def parse(self, filename: str) -> LocaleId | None:
        if not filename.endswith(self.extension):
            return None
        return parse_locale(filename[: -len(self.extension)])
