"""Shared constants.

Python 3.13+.
"""

import re

__all__ = [
    "CATALOG_ENCODING",
    "LOCALE_SEPARATOR",
    "MAX_LOCALE_SEGMENTS",
    "PLACEHOLDER_PATTERN",
    "PROPERTIES_EXTENSION",
]

# Catalog files are always read and written as UTF-8
CATALOG_ENCODING = "utf-8"

PROPERTIES_EXTENSION = ".properties"

# language[_region[_variant]]
LOCALE_SEPARATOR = "_"
MAX_LOCALE_SEGMENTS = 3

# Numbered argument slots in message templates: "Hello, {0}!"
PLACEHOLDER_PATTERN = re.compile(r"\{(\d+)\}")
