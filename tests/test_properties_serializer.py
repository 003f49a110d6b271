"""Tests for the properties serializer and parser round trip.

Python 3.13+.
"""

import io

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from msgdef.properties import append, escape, parse, serialize
from tests.strategies import message_maps


class TestEscape:
    """Test escape()."""

    def test_plain_text(self) -> None:
        """Letters and digits are copied."""
        assert escape("abcXYZ019", escape_space=True) == "abcXYZ019"

    def test_backslash(self) -> None:
        """Backslashes are doubled."""
        assert escape("a\\b", escape_space=False) == "a\\\\b"

    def test_spaces_in_keys(self) -> None:
        """Every space is escaped in keys."""
        assert escape(" a b", escape_space=True) == "\\ a\\ b"

    def test_spaces_in_values(self) -> None:
        """Only a leading space is escaped in values."""
        assert escape(" a b ", escape_space=False) == "\\ a b "

    def test_mnemonics(self) -> None:
        """Control characters get mnemonic escapes."""
        assert escape("\t\n\r\f", escape_space=False) == "\\t\\n\\r\\f"

    def test_specials(self) -> None:
        """Separators and comment markers are escaped."""
        assert escape("=:#!", escape_space=False) == "\\=\\:\\#\\!"

    def test_non_ascii_verbatim(self) -> None:
        """Non-ASCII is written as is, never as \\uXXXX."""
        assert escape("éあ\x7f", escape_space=False) == "éあ\x7f"

    def test_decode_accepts_more_than_encode_produces(self) -> None:
        """\\uXXXX input decodes, but re-encoding writes the raw character."""
        decoded = parse("k=\\u3042")
        assert decoded == {"k": "あ"}
        assert serialize(decoded, "\n") == "k=あ\n"


class TestSerialize:
    """Test serialize() and append()."""

    def test_serialize(self) -> None:
        """Entries become key=value lines in order."""
        assert serialize({"b": "2", "a key": "x=y"}, "\n") == "b=2\na\\ key=x\\=y\n"

    def test_empty(self) -> None:
        """An empty map serializes to nothing."""
        assert serialize({}) == ""

    def test_append_leaves_stream_open(self) -> None:
        """append() writes and keeps the stream open."""
        stream = io.StringIO("existing=1\n")
        stream.seek(0, io.SEEK_END)
        append(stream, {"new": "2"}, "\n")
        assert not stream.closed
        assert stream.getvalue() == "existing=1\nnew=2\n"


class TestRoundTrip:
    """parse(serialize(m)) == m for every escapable character."""

    @pytest.mark.parametrize(
        "messages",
        [
            {"a": "1"},
            {" lead": " lead", "trail ": "trail "},
            {"#comment": "!bang", "!": "#"},
            {"back\\slash\\": "end\\"},
            {"": ""},
            {"k": "line1\nline2\r\n\ttab\fform"},
            {"sep=:": "=:= :"},
        ],
    )
    def test_examples(self, messages: dict[str, str]) -> None:
        """Hand-picked tricky entries survive a round trip."""
        assert parse(serialize(messages)) == messages

    @given(message_maps(), st.sampled_from(["\n", "\r\n", "\r"]))
    def test_property(self, messages: dict[str, str], separator: str) -> None:
        """Round trip preserves keys, values and order."""
        event(f"line_separator={separator!r}")
        result = parse(serialize(messages, separator))
        assert list(result.items()) == list(messages.items())
