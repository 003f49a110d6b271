"""msgdef - typed message keys and properties-file message catalogs.

Define messages once with their default texts, bind typed placeholders to
their keys, and load per-locale catalogs from a directory of ``.properties``
files. Default messages missing from a catalog are appended to its file, so
existing translations are never rewritten.

Public API:
    MessageKey, Arg1 .. Arg5 - Typed message keys (key(), arg1() .. arg5())
    Placeholder - Typed argument conversion; see msgdef.message.placeholder for factories
    DefaultMessageDefiner - Registry of keys and default texts
    DirectorySource - Directory scanning and catalog loading
    TranslationStore - Rendering of keys against loaded catalogs
    LocaleId, parse_locale - Catalog locale identifiers

Exceptions:
    MessageDefError - Base exception class
    ConfigurationError - DirectorySource misuse
    PropertiesSyntaxError - Malformed properties text

Submodules:
    msgdef.properties - Properties codec and file helpers
    msgdef.localization - Loading pipeline, processors and stores
"""

from .errors import ConfigurationError, MessageDefError, PropertiesSyntaxError
from .locale_utils import LocaleId, parse_locale
from .localization import DirectorySource, LoadedMessageMap, TranslationStore
from .message import (
    Arg1,
    Arg2,
    Arg3,
    Arg4,
    Arg5,
    DefaultMessageDefiner,
    MessageKey,
    Placeholder,
    Text,
    Translatable,
    arg1,
    arg2,
    arg3,
    arg4,
    arg5,
    key,
    placeholder,
)

try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("msgdef")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Arg1",
    "Arg2",
    "Arg3",
    "Arg4",
    "Arg5",
    "ConfigurationError",
    "DefaultMessageDefiner",
    "DirectorySource",
    "LoadedMessageMap",
    "LocaleId",
    "MessageDefError",
    "MessageKey",
    "Placeholder",
    "PropertiesSyntaxError",
    "Text",
    "Translatable",
    "TranslationStore",
    "__version__",
    "arg1",
    "arg2",
    "arg3",
    "arg4",
    "arg5",
    "key",
    "parse_locale",
    "placeholder",
]
