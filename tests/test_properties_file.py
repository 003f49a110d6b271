"""Tests for properties file loading and appending.

Python 3.13+.
"""

import os
from pathlib import Path

from msgdef.locale_utils import LocaleId
from msgdef.properties import (
    DEFAULT_APPENDER,
    DEFAULT_LOADER,
    FILE_EXTENSION,
    append_file,
    load_file,
)


class TestLoadFile:
    """Test load_file()."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file loads as an empty dict and is not created."""
        path = tmp_path / "en.properties"
        assert load_file(path) == {}
        assert not path.exists()

    def test_directory_is_not_a_file(self, tmp_path: Path) -> None:
        """A directory with the catalog's name loads as empty."""
        assert load_file(tmp_path) == {}

    def test_load(self, tmp_path: Path) -> None:
        """UTF-8 content is parsed in order."""
        path = tmp_path / "ja.properties"
        path.write_bytes("# header\r\nb=ビー\r\na=エー\r\n".encode())
        result = load_file(path)
        assert list(result.items()) == [("b", "ビー"), ("a", "エー")]

    def test_accepts_str_path(self, tmp_path: Path) -> None:
        """String paths are accepted."""
        path = tmp_path / "en.properties"
        path.write_text("a=1\n", encoding="utf-8")
        assert load_file(str(path)) == {"a": "1"}


class TestAppendFile:
    """Test append_file()."""

    def test_creates_file(self, tmp_path: Path) -> None:
        """Appending to a missing file creates it."""
        path = tmp_path / "en.properties"
        append_file(path, {"a": "1", "b c": "2"})
        expected = f"a=1{os.linesep}b\\ c=2{os.linesep}"
        assert path.read_bytes() == expected.encode("utf-8")

    def test_appends_without_rewriting(self, tmp_path: Path) -> None:
        """Existing bytes are kept verbatim; only the delta is added."""
        path = tmp_path / "en.properties"
        original = b"# translated by hand\nz = zed\n"
        path.write_bytes(original)
        append_file(path, {"a": "1"})
        content = path.read_bytes()
        assert content.startswith(original)
        assert content[len(original) :] == f"a=1{os.linesep}".encode()

    def test_non_ascii_written_as_utf8(self, tmp_path: Path) -> None:
        """Non-ASCII text is stored as UTF-8, not escaped."""
        path = tmp_path / "ja.properties"
        append_file(path, {"greeting": "こんにちは"})
        assert "こんにちは".encode() in path.read_bytes()
        assert load_file(path) == {"greeting": "こんにちは"}


class TestDefaults:
    """Test the exported default loader, appender and naming convention."""

    def test_defaults_are_file_functions(self) -> None:
        """The defaults are load_file and append_file."""
        assert DEFAULT_LOADER is load_file
        assert DEFAULT_APPENDER is append_file

    def test_file_extension(self) -> None:
        """The properties naming convention round-trips locales."""
        assert FILE_EXTENSION.to_filename(LocaleId("en", "US")) == "en_US.properties"
        assert FILE_EXTENSION.parse("en_US.properties") == LocaleId("en", "US")
