"""Encode ordered string maps as properties-format text.

Each entry becomes ``escaped_key=escaped_value`` followed by a line
separator. Escaping rules:

- printable ASCII after ``=`` (0x3E..0x7E) is copied, except ``\\`` -> ``\\\\``
- space -> ``\\ `` in keys, and in values only at position 0
- tab, newline, carriage return, form feed -> ``\\t \\n \\r \\f``
- ``= : # !`` -> ``\\=`` ``\\:`` ``\\#`` ``\\!``
- everything else, including non-ASCII, is copied verbatim

The output never contains ``\\uXXXX`` escapes, although the parser accepts
them; files stay readable UTF-8.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import TextIO

__all__ = ["append", "escape", "serialize"]

_MNEMONICS = {"\t": "\\t", "\n": "\\n", "\r": "\\r", "\f": "\\f"}
_SPECIALS = frozenset("=:#!")


def escape(text: str, *, escape_space: bool) -> str:
    """Escape a key or value.

    Args:
        text: Raw key or value
        escape_space: Escape every space (keys) rather than only a leading one (values)

    Returns:
        Escaped text that parses back to ``text``
    """
    chars: list[str] = []
    for index, char in enumerate(text):
        if "=" < char < "\x7f":
            chars.append("\\\\" if char == "\\" else char)
        elif char == " ":
            chars.append("\\ " if index == 0 or escape_space else " ")
        elif char in _MNEMONICS:
            chars.append(_MNEMONICS[char])
        elif char in _SPECIALS:
            chars.append("\\" + char)
        else:
            chars.append(char)
    return "".join(chars)


def serialize(messages: Mapping[str, str], line_separator: str = os.linesep) -> str:
    """Serialize messages to properties text in iteration order."""
    return "".join(
        f"{escape(key, escape_space=True)}={escape(value, escape_space=False)}{line_separator}"
        for key, value in messages.items()
    )


def append(
    writer: TextIO, messages: Mapping[str, str], line_separator: str = os.linesep
) -> None:
    """Write messages to a text stream. The stream is not closed.

    Open files with ``newline=""`` so the line separator is written as given.
    """
    writer.write(serialize(messages, line_separator))
