"""Processors reconciling loaded catalogs with default messages.

A processor receives a LoadedMessageMap and returns the messages that replace
it. The processors here add every default message missing from the loaded
catalog; messages already present are never overwritten. Optionally the added
messages (only those) are appended to the catalog file, so translators find
new keys in their files without existing content being rewritten.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from msgdef.properties.file import DEFAULT_APPENDER

if TYPE_CHECKING:
    from msgdef.localization.source import LoadedMessageMap
    from msgdef.localization.types import (
        DefaultMessages,
        MessageAppender,
        MessageMap,
        MessageProcessor,
    )

__all__ = [
    "append_missing_messages",
    "append_missing_messages_to_properties_file",
    "reconcile",
]

logger = logging.getLogger(__name__)


def reconcile(messages: MessageMap, defaults: Mapping[str, str]) -> MessageMap:
    """Insert defaults absent from messages, in place.

    Args:
        messages: Loaded catalog; its values always win
        defaults: Baseline messages

    Returns:
        The inserted entries, in baseline order

    Example:
        >>> loaded = {"a": "1"}
        >>> reconcile(loaded, {"a": "2", "b": "3"})
        {'b': '3'}
        >>> loaded
        {'a': '1', 'b': '3'}
    """
    missing: MessageMap = {}
    for key, value in defaults.items():
        if key not in messages:
            messages[key] = value
            missing[key] = value
    return missing


def append_missing_messages(
    defaults: DefaultMessages, appender: MessageAppender | None = None
) -> MessageProcessor:
    """Create a processor adding missing default messages to each catalog.

    Args:
        defaults: Baseline mapping shared by all locales, or a callable
            returning the baseline for a locale (None means no baseline)
        appender: Receives (filepath, missing messages) when anything was added

    Raises:
        TypeError: If defaults is None, or appender is given but not callable
    """
    if defaults is None:
        msg = "defaults must not be None"
        raise TypeError(msg)
    if appender is not None and not callable(appender):
        msg = "appender must be callable"
        raise TypeError(msg)

    def process(loaded: LoadedMessageMap) -> MessageMap:
        baseline = defaults if isinstance(defaults, Mapping) else defaults(loaded.locale)
        if baseline is None:
            return loaded.messages

        missing = reconcile(loaded.messages, baseline)
        if missing and appender is not None:
            appender(loaded.filepath, missing)
            logger.info(
                "Appended %d missing messages to %s", len(missing), loaded.filepath
            )
        return loaded.messages

    return process


def append_missing_messages_to_properties_file(defaults: DefaultMessages) -> MessageProcessor:
    """Like append_missing_messages(), appending to the catalog's properties file."""
    return append_missing_messages(defaults, DEFAULT_APPENDER)
