"""Translation stores: where loaded catalogs are registered for lookup.

``TranslationStore`` holds the catalogs of one namespace, keyed by locale,
and renders ``Text``/``Translatable`` outputs. Templates use numbered slots:
``"Hello, {0}!"`` receives the first converted argument. Lookups fall back
from the requested locale to its parents (``en_US_WIN`` -> ``en_US`` -> ``en``)
and then to the store's default locale. A key with no template anywhere
renders as the key itself.

``GlobalTranslator`` aggregates stores so that application code can render
without knowing which namespace defines a key.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping
from typing import Protocol

from msgdef.constants import PLACEHOLDER_PATTERN
from msgdef.locale_utils import LocaleId, coerce_locale
from msgdef.message.output import OutputLike, Text, as_output

__all__ = [
    "GLOBAL_TRANSLATOR",
    "GlobalTranslator",
    "MessageSink",
    "TranslationStore",
]

logger = logging.getLogger(__name__)


class MessageSink(Protocol):
    """Anything accepting whole catalogs per locale."""

    def register_all(self, locale: LocaleId, messages: Mapping[str, str]) -> None:
        """Register every message of a catalog for locale."""
        ...


def _render(
    output: OutputLike,
    locale: LocaleId,
    lookup: Callable[[str, LocaleId], str | None],
) -> str:
    value = as_output(output)
    if isinstance(value, Text):
        return value.content

    template = lookup(value.key, locale)
    if template is None:
        logger.warning("Message '%s' not found for locale %s", value.key, locale)
        template = value.key

    args = [_render(arg, locale, lookup) for arg in value.args]

    def substitute(match: re.Match[str]) -> str:
        index = int(match.group(1))
        return args[index] if index < len(args) else match.group(0)

    return PLACEHOLDER_PATTERN.sub(substitute, template)


class TranslationStore:
    """Message templates of one namespace, per locale.

    Attributes:
        namespace: Name identifying the store in a GlobalTranslator
        default_locale: Last locale tried when looking up a template
    """

    __slots__ = ("_templates", "default_locale", "namespace")

    def __init__(self, namespace: str, *, default_locale: LocaleId | str = "en") -> None:
        """Create an empty store.

        Raises:
            TypeError: If namespace is not a string
            ValueError: If namespace is empty or default_locale does not parse
        """
        if not isinstance(namespace, str):
            msg = f"namespace must be a string, got {type(namespace).__name__}"
            raise TypeError(msg)
        if not namespace:
            msg = "namespace must not be empty"
            raise ValueError(msg)
        self.namespace = namespace
        self.default_locale = coerce_locale(default_locale)
        self._templates: dict[LocaleId, dict[str, str]] = {}

    def __repr__(self) -> str:
        return f"TranslationStore(namespace={self.namespace!r}, locales={len(self._templates)})"

    @property
    def locales(self) -> frozenset[LocaleId]:
        """Locales with at least one registered template."""
        return frozenset(self._templates)

    def register(self, locale: LocaleId | str, key: str, template: str) -> None:
        """Register one template, replacing an earlier one for the same key and locale."""
        if not key:
            msg = "key must not be empty"
            raise ValueError(msg)
        if template is None:
            msg = "template must not be None"
            raise TypeError(msg)
        self._templates.setdefault(coerce_locale(locale), {})[key] = template

    def register_all(self, locale: LocaleId | str, messages: Mapping[str, str]) -> None:
        """Register every template of a catalog."""
        resolved = coerce_locale(locale)
        for key, template in messages.items():
            self.register(resolved, key, template)
        logger.debug(
            "Registered %d messages for %s in store '%s'", len(messages), resolved, self.namespace
        )

    def contains(self, key: str, locale: LocaleId | str | None = None) -> bool:
        """Check whether key has a template (for locale, or for any locale)."""
        if locale is None:
            return any(key in templates for templates in self._templates.values())
        return self.translate(key, locale) is not None

    def translate(self, key: str, locale: LocaleId | str) -> str | None:
        """Find the template for key, walking the locale fallback chain.

        Returns:
            The template, or None if no locale in the chain defines key
        """
        resolved = coerce_locale(locale)
        for candidate in (*resolved.fallback_chain(), self.default_locale):
            template = self._templates.get(candidate, {}).get(key)
            if template is not None:
                return template
        return None

    def render(self, output: OutputLike, locale: LocaleId | str) -> str:
        """Render a Text, Translatable or MessageKey to a string for locale."""
        return _render(output, coerce_locale(locale), self.translate)


class GlobalTranslator:
    """Ordered collection of TranslationStores consulted in registration order."""

    __slots__ = ("_sources",)

    def __init__(self) -> None:
        self._sources: dict[str, TranslationStore] = {}

    def __repr__(self) -> str:
        return f"GlobalTranslator(sources={list(self._sources)})"

    @property
    def sources(self) -> tuple[TranslationStore, ...]:
        """Registered stores in registration order."""
        return tuple(self._sources.values())

    def add_source(self, store: TranslationStore) -> bool:
        """Register store. Returns False if its namespace is already registered."""
        if store.namespace in self._sources:
            return False
        self._sources[store.namespace] = store
        logger.debug("Added translation store '%s'", store.namespace)
        return True

    def remove_source(self, store: TranslationStore) -> bool:
        """Unregister store. Returns False if it was not registered."""
        if self._sources.get(store.namespace) is not store:
            return False
        del self._sources[store.namespace]
        return True

    def translate(self, key: str, locale: LocaleId | str) -> str | None:
        """Return the template from the first store that defines key."""
        for store in self._sources.values():
            template = store.translate(key, locale)
            if template is not None:
                return template
        return None

    def render(self, output: OutputLike, locale: LocaleId | str) -> str:
        """Render output using every registered store."""
        return _render(output, coerce_locale(locale), self.translate)


GLOBAL_TRANSLATOR = GlobalTranslator()
"""Process-wide translator used by DirectorySource.load_and_register()."""
