"""Decode properties-format text into an ordered dict.

Implements the classic ``.properties`` grammar:

- Natural lines end at ``\\n``, ``\\r`` or ``\\r\\n``.
- Leading spaces, tabs and form feeds of a line are ignored.
- Lines whose first non-blank character is ``#`` or ``!`` are comments.
- A line ending in an odd number of backslashes continues on the next line;
  the backslash and the next line's leading whitespace are dropped.
- The key ends at the first unescaped ``=``, ``:`` or whitespace. Whitespace
  and at most one ``=``/``:`` between key and value are skipped.
- Escapes: ``\\t \\n \\r \\f``, ``\\uXXXX``, and ``\\`` followed by any other
  character stands for that character.

Entries are kept in first-occurrence order; a repeated key keeps its first
position and takes the last value.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import string
from typing import TYPE_CHECKING

from msgdef.errors import PropertiesSyntaxError

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import TextIO

__all__ = ["parse"]

_WHITESPACE = frozenset(" \t\f")
_LINE_BREAKS = frozenset("\r\n")
_COMMENT_STARTS = frozenset("#!")
_SEPARATORS = frozenset("=:")
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_HEX_DIGITS = frozenset(string.hexdigits)


def parse(source: str | TextIO) -> dict[str, str]:
    """Parse properties text.

    Args:
        source: Properties text, or a readable text stream (not closed)

    Returns:
        Ordered mapping of decoded keys to decoded values

    Raises:
        PropertiesSyntaxError: If a ``\\uXXXX`` escape is malformed
    """
    text = source if isinstance(source, str) else source.read()
    messages: dict[str, str] = {}
    for line_number, line in _logical_lines(text):
        key, value = _split_entry(line, line_number)
        messages[key] = value
    return messages


def _logical_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield (starting line number, raw logical line) pairs.

    Comment lines and blank lines are dropped, continuation lines are joined.
    Escapes are left in place.
    """
    buffer: list[str] = []
    line_number = 1
    start_line = 1
    previous = ""

    skip_whitespace = True
    appended_line_begin = False
    is_new_line = True
    is_comment = False
    preceding_backslash = False
    skip_lf = False

    for char in text:
        if char == "\r" or (char == "\n" and previous != "\r"):
            line_number += 1
        previous = char

        if skip_lf:
            skip_lf = False
            if char == "\n":
                continue

        if skip_whitespace:
            if char in _WHITESPACE:
                continue
            if not appended_line_begin and char in _LINE_BREAKS:
                continue
            skip_whitespace = False
            appended_line_begin = False

        if is_new_line:
            is_new_line = False
            start_line = line_number
            if char in _COMMENT_STARTS:
                is_comment = True

        if char not in _LINE_BREAKS:
            if not is_comment:
                buffer.append(char)
                preceding_backslash = not preceding_backslash if char == "\\" else False
            continue

        if is_comment or not buffer:
            is_comment = False
            is_new_line = True
            skip_whitespace = True
            buffer.clear()
            continue

        if preceding_backslash:
            # The backslash joins the lines and is not part of the value
            buffer.pop()
            skip_whitespace = True
            appended_line_begin = True
            preceding_backslash = False
            if char == "\r":
                skip_lf = True
            continue

        yield start_line, "".join(buffer)
        buffer.clear()
        is_new_line = True
        skip_whitespace = True

    if buffer and not is_comment:
        if preceding_backslash:
            buffer.pop()
        yield start_line, "".join(buffer)


def _split_entry(line: str, line_number: int) -> tuple[str, str]:
    """Split a logical line into its decoded key and value."""
    limit = len(line)
    key_end = 0
    value_start = limit
    has_separator = False
    preceding_backslash = False

    while key_end < limit:
        char = line[key_end]
        if not preceding_backslash:
            if char in _SEPARATORS:
                value_start = key_end + 1
                has_separator = True
                break
            if char in _WHITESPACE:
                value_start = key_end + 1
                break
        preceding_backslash = not preceding_backslash if char == "\\" else False
        key_end += 1

    while value_start < limit:
        char = line[value_start]
        if char not in _WHITESPACE:
            if has_separator or char not in _SEPARATORS:
                break
            has_separator = True
        value_start += 1

    key = _unescape(line[:key_end], line_number)
    value = _unescape(line[value_start:], line_number)
    return key, value


def _unescape(segment: str, line_number: int) -> str:
    """Resolve backslash escapes in a key or value."""
    if "\\" not in segment:
        return segment

    chars: list[str] = []
    index = 0
    limit = len(segment)
    while index < limit:
        char = segment[index]
        index += 1
        if char != "\\":
            chars.append(char)
            continue
        if index >= limit:
            break

        char = segment[index]
        index += 1
        if char == "u":
            digits = segment[index : index + 4]
            if len(digits) != 4 or not _HEX_DIGITS.issuperset(digits):
                msg = "Malformed \\uxxxx encoding"
                raise PropertiesSyntaxError(msg, line_number)
            chars.append(chr(int(digits, 16)))
            index += 4
        else:
            chars.append(_ESCAPES.get(char, char))

    decoded = "".join(chars)
    if any("\ud800" <= char <= "\udfff" for char in decoded):
        # \uXXXX escapes encode UTF-16 code units; merge surrogate pairs
        decoded = decoded.encode("utf-16-le", "surrogatepass").decode(
            "utf-16-le", "surrogatepass"
        )
    return decoded
