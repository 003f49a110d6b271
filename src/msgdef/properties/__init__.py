"""Properties-format codec.

Submodules:
    parser     - parse(): text or stream -> ordered dict
    serializer - escape(), serialize(), append() to a stream
    file       - load_file(), append_file() and the default loader/appender

Python 3.13+.
"""

from msgdef.properties.file import (
    DEFAULT_APPENDER,
    DEFAULT_LOADER,
    FILE_EXTENSION,
    append_file,
    load_file,
)
from msgdef.properties.parser import parse
from msgdef.properties.serializer import append, escape, serialize

__all__ = [
    "DEFAULT_APPENDER",
    "DEFAULT_LOADER",
    "FILE_EXTENSION",
    "append",
    "append_file",
    "escape",
    "load_file",
    "parse",
    "serialize",
]
