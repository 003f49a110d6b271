"""Tests for the top-level msgdef namespace.

Python 3.13+.
"""

from pathlib import Path

import msgdef
from msgdef.localization import append_missing_messages_to_properties_file


class TestPublicApi:
    """Test exports from msgdef/__init__.py."""

    def test_all_names_resolve(self) -> None:
        """Every name in __all__ is an attribute of the package."""
        for name in msgdef.__all__:
            assert hasattr(msgdef, name), name

    def test_version_is_string(self) -> None:
        """__version__ is set whether or not the package is installed."""
        assert isinstance(msgdef.__version__, str)
        assert msgdef.__version__

    def test_errors_share_base(self) -> None:
        """Library exceptions derive from MessageDefError."""
        assert issubclass(msgdef.ConfigurationError, msgdef.MessageDefError)
        assert issubclass(msgdef.PropertiesSyntaxError, msgdef.MessageDefError)

    def test_end_to_end(self, tmp_path: Path) -> None:
        """Define, load and render a message through the public API."""
        definer = msgdef.DefaultMessageDefiner()
        greeting = definer.define("greeting", "Hello, {0}!").with_args(msgdef.placeholder.text())

        store = (
            msgdef.DirectorySource.properties_files(tmp_path)
            .with_default_locales("en")
            .with_message_processor(
                append_missing_messages_to_properties_file(definer.collected_messages)
            )
            .load_as_store("app")
        )

        assert store.render(greeting.apply("World"), "en_GB") == "Hello, World!"
        assert (tmp_path / "en.properties").is_file()
