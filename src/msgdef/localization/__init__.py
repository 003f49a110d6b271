"""Catalog loading, reconciliation and registration.

Submodules:
    types      - type aliases (MessageMap, MessageLoader, MessageProcessor, ...)
    source     - DirectorySource, LoadedMessageMap
    processors - reconcile(), append_missing_messages() and the properties variant
    store      - TranslationStore, GlobalTranslator, MessageSink

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from msgdef.localization.processors import (
    append_missing_messages,
    append_missing_messages_to_properties_file,
    reconcile,
)
from msgdef.localization.source import DirectorySource, LoadedMessageMap
from msgdef.localization.store import (
    GLOBAL_TRANSLATOR,
    GlobalTranslator,
    MessageSink,
    TranslationStore,
)
from msgdef.localization.types import (
    DefaultMessages,
    MessageAppender,
    MessageLoader,
    MessageMap,
    MessageProcessor,
)

__all__ = [
    # Directory loading
    "DirectorySource",
    "LoadedMessageMap",
    # Processors
    "reconcile",
    "append_missing_messages",
    "append_missing_messages_to_properties_file",
    # Registration
    "MessageSink",
    "TranslationStore",
    "GlobalTranslator",
    "GLOBAL_TRANSLATOR",
    # Type aliases
    "DefaultMessages",
    "MessageAppender",
    "MessageLoader",
    "MessageMap",
    "MessageProcessor",
]
