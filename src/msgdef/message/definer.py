"""Registry of message keys and their default texts.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from types import MappingProxyType

from msgdef.message.key import MessageKey

__all__ = ["DefaultMessageDefiner"]


class DefaultMessageDefiner:
    """Collects ``key -> default message`` pairs while handing out MessageKeys.

    Define every message once at import time, then seed catalogs from
    ``collected_messages``:

        >>> definer = DefaultMessageDefiner()
        >>> HELLO = definer.define("hello", "Hello!")
        >>> dict(definer.collected_messages)
        {'hello': 'Hello!'}

    Redefining a key replaces its default text and keeps its original position.
    """

    __slots__ = ("_messages",)

    def __init__(self) -> None:
        self._messages: dict[str, str] = {}

    def define(self, key: str, default_message: str) -> MessageKey:
        """Register a default message and return its key.

        Args:
            key: Non-empty message key
            default_message: Default text for the key

        Returns:
            MessageKey for key

        Raises:
            TypeError: If key or default_message is None or not a string
            ValueError: If key is empty
        """
        message_key = MessageKey(key)
        if default_message is None:
            msg = "default_message must not be None"
            raise TypeError(msg)
        if not isinstance(default_message, str):
            msg = f"default_message must be a string, got {type(default_message).__name__}"
            raise TypeError(msg)
        self._messages[key] = default_message
        return message_key

    @property
    def collected_messages(self) -> MappingProxyType[str, str]:
        """Read-only live view of the defined messages, in definition order."""
        return MappingProxyType(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __repr__(self) -> str:
        return f"DefaultMessageDefiner(messages={len(self._messages)})"
