"""Properties files on disk.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from msgdef.constants import CATALOG_ENCODING, PROPERTIES_EXTENSION
from msgdef.naming import FileExtension
from msgdef.properties.parser import parse
from msgdef.properties.serializer import append

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = [
    "DEFAULT_APPENDER",
    "DEFAULT_LOADER",
    "FILE_EXTENSION",
    "append_file",
    "load_file",
]

logger = logging.getLogger(__name__)

FILE_EXTENSION = FileExtension(PROPERTIES_EXTENSION)
"""Naming convention for ``<locale>.properties`` files."""


def load_file(path: Path | str) -> dict[str, str]:
    """Load messages from a properties file.

    Args:
        path: File to read (UTF-8)

    Returns:
        Ordered messages; an empty dict if path is not a regular file

    Raises:
        PropertiesSyntaxError: If the file contains a malformed escape
        OSError: If the file exists but cannot be read
    """
    path = Path(path)
    if not path.is_file():
        logger.debug("No properties file at %s, starting empty", path)
        return {}

    # newline="" hands \r and \r\n to the parser untranslated
    with path.open(encoding=CATALOG_ENCODING, newline="") as reader:
        return parse(reader)


def append_file(path: Path | str, messages: Mapping[str, str]) -> None:
    """Append messages to a properties file, creating it if missing.

    Existing content is never rewritten.

    Raises:
        OSError: If the file cannot be opened for appending
    """
    with Path(path).open("a", encoding=CATALOG_ENCODING, newline="") as writer:
        append(writer, messages)


DEFAULT_LOADER = load_file
DEFAULT_APPENDER = append_file
