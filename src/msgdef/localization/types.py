"""Type aliases for the catalog loading pipeline.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from msgdef.locale_utils import LocaleId
    from msgdef.localization.source import LoadedMessageMap

__all__ = [
    "DefaultMessages",
    "MessageAppender",
    "MessageLoader",
    "MessageMap",
    "MessageProcessor",
]

type MessageMap = dict[str, str]
"""Ordered key -> message text mapping for one locale."""

type MessageLoader = Callable[[Path], MessageMap]
"""Reads the catalog stored at a path (may return {} for a missing file)."""

type MessageProcessor = Callable[[LoadedMessageMap], MessageMap]
"""Post-load step; its result replaces the loaded catalog."""

type MessageAppender = Callable[[Path, Mapping[str, str]], None]
"""Persists newly added messages to the catalog stored at a path."""

type DefaultMessages = Mapping[str, str] | Callable[[LocaleId], Mapping[str, str] | None]
"""Baseline messages: one mapping for every locale, or a per-locale supplier."""
