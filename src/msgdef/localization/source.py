"""Loading message catalogs from a directory.

``DirectorySource`` is an immutable configuration: every ``with_*`` method
returns a modified copy. A configured source scans its directory for files
named after locales, makes sure every default locale gets a catalog path even
when its file does not exist yet, loads each catalog and optionally runs a
processor (such as ``append_missing_messages``) over it.

Example:
    >>> source = (
    ...     DirectorySource.properties_files(Path("languages"))
    ...     .with_default_locales("en", "ja_JP")
    ...     .with_message_processor(append_missing_messages_to_properties_file(defaults))
    ... )
    >>> source.load(lambda loaded: store.register_all(loaded.locale, loaded.messages))

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING

from msgdef.errors import ConfigurationError
from msgdef.locale_utils import LocaleId, coerce_locale
from msgdef.naming import FileExtension, NamingConvention
from msgdef.properties.file import DEFAULT_LOADER, FILE_EXTENSION

if TYPE_CHECKING:
    from msgdef.localization.store import GlobalTranslator, TranslationStore
    from msgdef.localization.types import MessageLoader, MessageMap, MessageProcessor

__all__ = ["DirectorySource", "LoadedMessageMap"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LoadedMessageMap:
    """A catalog produced by one load pass.

    Attributes:
        filepath: Catalog file (may not exist yet for a default locale)
        locale: Locale of the catalog
        messages: Loaded messages; owned by the receiver once handed over
    """

    filepath: Path
    locale: LocaleId
    messages: MessageMap

    def __post_init__(self) -> None:
        """Reject missing fields.

        Raises:
            TypeError: If any field is None
        """
        for name in ("filepath", "locale", "messages"):
            if getattr(self, name) is None:
                msg = f"{name} must not be None"
                raise TypeError(msg)


@dataclass(frozen=True, slots=True)
class DirectorySource:
    """Configuration for loading ``<locale><extension>`` catalogs from a directory.

    Attributes:
        directory: Directory scanned (non-recursively) for catalog files
        default_locales: Locales that always get a catalog, even without a file
        naming: Filename <-> locale convention
        message_loader: Reads one catalog file
        message_processor: Runs on every loaded catalog before it is consumed
    """

    directory: Path
    default_locales: frozenset[LocaleId] = frozenset()
    naming: NamingConvention | None = None
    message_loader: MessageLoader | None = None
    message_processor: MessageProcessor | None = None

    def __post_init__(self) -> None:
        """Normalize directory to a Path.

        Raises:
            TypeError: If directory is None
        """
        if self.directory is None:
            msg = "directory must not be None"
            raise TypeError(msg)
        object.__setattr__(self, "directory", Path(self.directory))

    @classmethod
    def create(cls, directory: Path | str) -> DirectorySource:
        """Create an unconfigured source for directory."""
        return cls(Path(directory))

    @classmethod
    def properties_files(cls, directory: Path | str) -> DirectorySource:
        """Create a source reading ``<locale>.properties`` files."""
        return cls.create(directory).with_naming(FILE_EXTENSION).with_message_loader(DEFAULT_LOADER)

    def with_naming(self, naming: NamingConvention) -> DirectorySource:
        """Return a copy using the given naming convention.

        Raises:
            TypeError: If naming is None
        """
        if naming is None:
            msg = "naming must not be None"
            raise TypeError(msg)
        return replace(self, naming=naming)

    def with_file_extension(self, extension: str) -> DirectorySource:
        """Return a copy matching ``<locale><extension>`` filenames."""
        return self.with_naming(FileExtension(extension))

    def with_default_locales(self, *locales: LocaleId | str) -> DirectorySource:
        """Return a copy with locales added to the default locales.

        Raises:
            TypeError: If a locale is None
            ValueError: If a locale string does not parse
        """
        added = frozenset(coerce_locale(locale) for locale in locales)
        return replace(self, default_locales=self.default_locales | added)

    def with_message_loader(self, loader: Callable[[Path], MessageMap]) -> DirectorySource:
        """Return a copy reading catalog files with loader.

        Raises:
            TypeError: If loader is not callable
            ConfigurationError: If a message loader is already set
        """
        if not callable(loader):
            msg = "loader must be callable"
            raise TypeError(msg)
        if self.message_loader is not None:
            msg = "The message loader is already set"
            raise ConfigurationError(msg)
        return replace(self, message_loader=loader)

    def with_message_processor(self, processor: MessageProcessor) -> DirectorySource:
        """Return a copy running processor over every loaded catalog.

        The processor's return value replaces the loaded messages.

        Raises:
            TypeError: If processor is not callable
            ConfigurationError: If no message loader is set yet, or a processor is already set
        """
        if not callable(processor):
            msg = "processor must be callable"
            raise TypeError(msg)
        if self.message_loader is None:
            msg = "The message loader is not set"
            raise ConfigurationError(msg)
        if self.message_processor is not None:
            msg = "The message processor is already set"
            raise ConfigurationError(msg)
        return replace(self, message_processor=processor)

    def load(self, consumer: Callable[[LoadedMessageMap], object]) -> None:
        """Load every catalog and hand each one to consumer.

        Files directly inside the directory whose names parse as locales are
        loaded, plus one (possibly not yet existing) file per default locale
        without a file. When nothing matches and there are no default locales,
        nothing happens. Otherwise the directory is created if missing.

        Args:
            consumer: Receives each LoadedMessageMap; cross-locale order is unspecified

        Raises:
            ConfigurationError: If the naming convention or message loader is not set
            OSError: If the directory or a catalog file cannot be accessed
        """
        if self.naming is None:
            msg = "The naming convention is not set"
            raise ConfigurationError(msg)
        if self.message_loader is None:
            msg = "The message loader is not set"
            raise ConfigurationError(msg)
        if not callable(consumer):
            msg = "consumer must be callable"
            raise TypeError(msg)

        file_locales = self._collect_files(self.naming)
        if not file_locales:
            if not self.default_locales:
                return
            logger.debug("Creating catalog directory %s", self.directory)
            self.directory.mkdir(parents=True, exist_ok=True)

        for locale in sorted(self.default_locales, key=str):
            filepath = self.directory / self.naming.to_filename(locale)
            file_locales.setdefault(filepath, locale)

        for filepath, locale in file_locales.items():
            consumer(self._load_one(filepath, locale))

    def load_as_store(self, namespace: str) -> TranslationStore:
        """Load every catalog into a new TranslationStore."""
        from msgdef.localization.store import TranslationStore  # noqa: PLC0415

        store = TranslationStore(namespace)
        self.load(lambda loaded: store.register_all(loaded.locale, loaded.messages))
        return store

    def load_and_register(
        self, namespace: str, translator: GlobalTranslator | None = None
    ) -> TranslationStore:
        """Load into a new TranslationStore and add it to a translator.

        Args:
            namespace: Namespace of the new store
            translator: Translator to register with; defaults to GLOBAL_TRANSLATOR
        """
        from msgdef.localization.store import GLOBAL_TRANSLATOR  # noqa: PLC0415

        store = self.load_as_store(namespace)
        (translator if translator is not None else GLOBAL_TRANSLATOR).add_source(store)
        return store

    def _load_one(self, filepath: Path, locale: LocaleId) -> LoadedMessageMap:
        assert self.message_loader is not None  # checked in load()
        messages = self.message_loader(filepath)
        if not isinstance(messages, dict):
            messages = dict(messages)
        loaded = LoadedMessageMap(filepath, locale, messages)
        logger.debug("Loaded %d messages for %s from %s", len(messages), locale, filepath)

        if self.message_processor is not None:
            loaded = LoadedMessageMap(filepath, locale, self.message_processor(loaded))
        return loaded

    def _collect_files(self, naming: NamingConvention) -> dict[Path, LocaleId]:
        if not self.directory.is_dir():
            return {}

        file_locales: dict[Path, LocaleId] = {}
        for path in sorted(self.directory.iterdir()):
            if not path.is_file():
                continue
            locale = naming.parse(path.name)
            if locale is not None:
                logger.debug("Matched %s to locale %s", path.name, locale)
                file_locales[path] = locale
        return file_locales
