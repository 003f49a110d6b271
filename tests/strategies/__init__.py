"""Hypothesis strategies for msgdef property-based testing.

Usage:
    from tests.strategies import message_maps, property_texts
"""

from .catalogs import (
    PROPERTY_ALPHABET,
    locale_ids,
    locale_strings,
    message_keys,
    message_maps,
    property_texts,
)

__all__ = [
    "PROPERTY_ALPHABET",
    "locale_ids",
    "locale_strings",
    "message_keys",
    "message_maps",
    "property_texts",
]
