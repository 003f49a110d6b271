"""Output values produced by message keys and placeholders.

A placeholder converts an argument into an output unit; a message key
combines its key with the converted arguments into a ``Translatable``.
Rendering these values against a catalog is done by
``msgdef.localization.store.TranslationStore``.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

__all__ = [
    "Output",
    "OutputLike",
    "Text",
    "Translatable",
    "as_output",
]


@runtime_checkable
class OutputLike(Protocol):
    """Anything that can present itself as an Output value."""

    def as_output(self) -> Output:
        """Return the Output representation of this object."""
        ...


@dataclass(frozen=True, slots=True)
class Text:
    """Literal text, rendered verbatim.

    Attributes:
        content: The text to display
    """

    content: str

    def as_output(self) -> Text:
        """Return self."""
        return self


@dataclass(frozen=True, slots=True)
class Translatable:
    """A message key plus its already-converted arguments.

    Attributes:
        key: Message key looked up in the catalog at render time
        args: Converted arguments, in placeholder order
    """

    key: str
    args: tuple[Output, ...] = ()

    def as_output(self) -> Translatable:
        """Return self."""
        return self


type Output = Text | Translatable
"""Displayable unit produced by placeholders and message keys."""


def as_output(value: OutputLike) -> Output:
    """Convert an OutputLike to its Output form.

    Raises:
        TypeError: If value does not provide as_output()
    """
    if isinstance(value, Text | Translatable):
        return value
    if not isinstance(value, OutputLike):
        msg = f"Expected an Output or OutputLike value, got {type(value).__name__}"
        raise TypeError(msg)
    return value.as_output()
